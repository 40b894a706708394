from FamilyParameters.models.errors import (
    FamilyExportError,
    MappingResourceError,
    NotFamilyDocumentError,
    SettingsError,
)
from FamilyParameters.models.export_settings import ExportSettings, TranslationMode
from FamilyParameters.models.parameter_record import (
    INVALID_ELEMENT_ID,
    ElementInfo,
    ElementKind,
    ExportResult,
    ParameterDefinition,
    ParameterRecord,
    StorageType,
)

__all__ = [
    'FamilyExportError',
    'MappingResourceError',
    'NotFamilyDocumentError',
    'SettingsError',
    'ExportSettings',
    'TranslationMode',
    'INVALID_ELEMENT_ID',
    'ElementInfo',
    'ElementKind',
    'ExportResult',
    'ParameterDefinition',
    'ParameterRecord',
    'StorageType',
]
