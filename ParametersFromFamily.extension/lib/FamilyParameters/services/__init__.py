from FamilyParameters.services.export_runner import ExportOutcome, ExportStatus, FamilyParameterExporter
from FamilyParameters.services.parameter_source import InMemoryParameterSource, ParameterSource
from FamilyParameters.services.settings_loader import load_export_settings, load_group_mapping

__all__ = [
    'ExportOutcome',
    'ExportStatus',
    'FamilyParameterExporter',
    'InMemoryParameterSource',
    'ParameterSource',
    'load_export_settings',
    'load_group_mapping',
]
