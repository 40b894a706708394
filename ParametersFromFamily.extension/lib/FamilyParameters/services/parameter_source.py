# -*- coding: utf-8 -*-
"""Capability interface between the export pipeline and the host document."""


class ParameterSource(object):
    """
    Everything the exporter needs from the open document.

    Value accessors receive the ParameterDefinition yielded by
    ``iter_parameters`` and return None when the current type holds no value.
    Element ids are plain integers; ``INVALID_ELEMENT_ID`` marks an empty
    reference.
    """

    def is_family_document(self):
        raise NotImplementedError

    def document_title(self):
        raise NotImplementedError

    def iter_parameters(self):
        raise NotImplementedError

    def value_string(self, definition):
        """Host-formatted display text honoring units, or None."""
        raise NotImplementedError

    def as_double(self, definition):
        raise NotImplementedError

    def is_yes_no(self, definition):
        """True when an integer parameter is a yes/no toggle."""
        raise NotImplementedError

    def as_integer(self, definition):
        raise NotImplementedError

    def as_string(self, definition):
        raise NotImplementedError

    def as_element_id(self, definition):
        raise NotImplementedError

    def get_element(self, element_id):
        """Return an ElementInfo for the id, or None when nothing is found."""
        raise NotImplementedError


class InMemoryParameterSource(ParameterSource):
    """ParameterSource over plain Python data, for dry runs and tests."""

    def __init__(self, definitions=None, values=None, value_strings=None, elements=None,
                 title="Family.rfa", is_family=True):
        self.definitions = list(definitions or [])
        self.values = dict(values or {})
        self.value_strings = dict(value_strings or {})
        self.elements = dict(elements or {})
        self.title = title
        self.is_family = is_family

    def is_family_document(self):
        return self.is_family

    def document_title(self):
        return self.title

    def iter_parameters(self):
        return iter(self.definitions)

    def value_string(self, definition):
        return self._lookup(self.value_strings, definition)

    def as_double(self, definition):
        return self._lookup(self.values, definition)

    def is_yes_no(self, definition):
        return definition.is_yes_no

    def as_integer(self, definition):
        return self._lookup(self.values, definition)

    def as_string(self, definition):
        return self._lookup(self.values, definition)

    def as_element_id(self, definition):
        return self._lookup(self.values, definition)

    def get_element(self, element_id):
        return self.elements.get(element_id)

    def _lookup(self, table, definition):
        value = table.get(definition.name)
        if isinstance(value, Exception):
            raise value
        return value
