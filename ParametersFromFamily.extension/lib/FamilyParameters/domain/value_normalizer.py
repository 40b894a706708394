# -*- coding: utf-8 -*-
"""
Turns a family parameter's current value into the text written to the report.

The host's own display string wins whenever it exists; otherwise the raw value
is rendered per storage type. Nothing in here raises: a failure while reading
one parameter becomes an ``Error: <message>`` value so the rest of the batch
still exports.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from FamilyParameters.models.parameter_record import INVALID_ELEMENT_ID, ElementKind, StorageType

NONE_TEXT = "None"
UNKNOWN_TEXT = "Unknown"
ERROR_PREFIX = "Error: "

_TWO_PLACES = Decimal("0.01")
# Wide enough for the full range of doubles
_CONTEXT = Context(prec=400)


def format_double(value):
    """Format like .NET's "0.##": at most two decimals, no trailing zeros."""
    if value is None:
        return NONE_TEXT
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    # repr() gives the shortest round-tripping text, so 12.345 rounds up to 12.35
    rounded = Decimal(repr(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = "{:f}".format(rounded)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def format_integer(value):
    if value is None:
        return NONE_TEXT
    return str(int(value))


def format_string(value):
    if value is None:
        return NONE_TEXT
    return value


def element_display_name(element):
    if element is None:
        return NONE_TEXT
    if element.kind in (ElementKind.MATERIAL, ElementKind.IMAGE):
        return element.name if element.name is not None else UNKNOWN_TEXT
    return element.name or UNKNOWN_TEXT


def is_invalid_element_id(element_id):
    return element_id is None or element_id == INVALID_ELEMENT_ID


class ValueNormalizer(object):
    """Resolves parameter values through a ParameterSource."""

    def __init__(self, source, settings, logger=None):
        self.source = source
        self.settings = settings
        self.logger = logger
        self.error_count = 0

    def normalize(self, definition):
        try:
            value = self.source.value_string(definition)
            if value is not None:
                return value
            return self._from_storage(definition)
        except Exception as ex:
            self.error_count += 1
            if self.logger:
                self.logger.warning("Could not read '{}': {}".format(definition.name, ex))
            return ERROR_PREFIX + str(ex)

    def _from_storage(self, definition):
        storage = definition.storage_type

        if storage == StorageType.DOUBLE:
            return format_double(self.source.as_double(definition))

        if storage == StorageType.INTEGER:
            if self.source.is_yes_no(definition):
                return self.settings.yes_no_literal
            return format_integer(self.source.as_integer(definition))

        if storage == StorageType.STRING:
            return format_string(self.source.as_string(definition))

        if storage == StorageType.ELEMENT_ID:
            return self.resolve_element_name(self.source.as_element_id(definition))

        return UNKNOWN_TEXT

    def resolve_element_name(self, element_id):
        if is_invalid_element_id(element_id):
            return NONE_TEXT
        return element_display_name(self.source.get_element(element_id))
