# -*- coding: utf-8 -*-
"""Family parameter export to CSV for Revit family documents."""

__version__ = "1.0.0"
