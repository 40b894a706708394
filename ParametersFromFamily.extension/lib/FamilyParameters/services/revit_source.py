# -*- coding: utf-8 -*-
from pyrevit import DB
from pyrevit.compat import get_elementid_value_func

from FamilyParameters.models.parameter_record import (
    INVALID_ELEMENT_ID,
    ElementInfo,
    ElementKind,
    ParameterDefinition,
)
from FamilyParameters.services.parameter_source import ParameterSource


class RevitFamilySource(ParameterSource):
    """Reads family parameters of the active family document via its FamilyManager."""

    def __init__(self, doc):
        self.doc = doc
        self._get_id_val = get_elementid_value_func()

    @property
    def family_manager(self):
        return self.doc.FamilyManager

    @property
    def current_type(self):
        return self.family_manager.CurrentType

    def is_family_document(self):
        return bool(getattr(self.doc, 'IsFamilyDocument', False))

    def document_title(self):
        return self.doc.Title

    def iter_parameters(self):
        for param in self.family_manager.Parameters:
            definition = param.Definition
            yield ParameterDefinition(
                name=definition.Name,
                group=self._group_identifier(definition),
                storage_type=str(param.StorageType),
                formula=param.Formula,
                is_instance=bool(param.IsInstance),
                handle=param,
            )

    def value_string(self, definition):
        return self.current_type.AsValueString(definition.handle)

    def as_double(self, definition):
        if not self.current_type.HasValue(definition.handle):
            return None
        return self.current_type.AsDouble(definition.handle)

    def is_yes_no(self, definition):
        return self._is_yes_no(definition.handle.Definition)

    def as_integer(self, definition):
        if not self.current_type.HasValue(definition.handle):
            return None
        return self.current_type.AsInteger(definition.handle)

    def as_string(self, definition):
        return self.current_type.AsString(definition.handle)

    def as_element_id(self, definition):
        element_id = self.current_type.AsElementId(definition.handle)
        if element_id is None or element_id == DB.ElementId.InvalidElementId:
            return INVALID_ELEMENT_ID
        return self._get_id_val(element_id)

    def get_element(self, element_id):
        element = self.doc.GetElement(DB.ElementId(element_id))
        if element is None:
            return None
        if isinstance(element, DB.Material):
            return ElementInfo(ElementKind.MATERIAL, element.Name)
        if isinstance(element, DB.ImageType):
            return ElementInfo(ElementKind.IMAGE, element.Name)
        return ElementInfo(ElementKind.OTHER, getattr(element, 'Name', None))

    def _group_identifier(self, definition):
        # ParameterGroup (PG_*) was removed in Revit 2025; fall back to the ForgeTypeId
        group = getattr(definition, 'ParameterGroup', None)
        if group is not None:
            return str(group)
        return definition.GetGroupTypeId().TypeId

    def _is_yes_no(self, definition):
        param_type = getattr(definition, 'ParameterType', None)
        if param_type is not None and hasattr(DB, 'ParameterType'):
            return param_type == DB.ParameterType.YesNo
        return definition.GetDataType() == DB.SpecTypeId.Boolean.YesNo
