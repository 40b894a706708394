# -*- coding: utf-8 -*-
"""Exceptions raised by the family parameter export."""


class FamilyExportError(Exception):
    """Base class for export failures that abort the command."""


class NotFamilyDocumentError(FamilyExportError):
    """The active document is not a family document."""


class MappingResourceError(FamilyExportError):
    """The bundled group mapping is missing or malformed."""

    def __init__(self, path, reason):
        FamilyExportError.__init__(self, "Group mapping '{}' could not be loaded: {}".format(path, reason))
        self.path = path
        self.reason = reason


class SettingsError(FamilyExportError, ValueError):
    """An export setting has an invalid value."""
