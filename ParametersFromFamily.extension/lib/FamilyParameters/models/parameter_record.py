"""Data-only classes passed between the export pipeline stages."""

INVALID_ELEMENT_ID = -1


class StorageType(object):
    DOUBLE = "Double"
    INTEGER = "Integer"
    STRING = "String"
    ELEMENT_ID = "ElementId"
    NONE = "None"

    @classmethod
    def all(cls):
        return [cls.DOUBLE, cls.INTEGER, cls.STRING, cls.ELEMENT_ID, cls.NONE]


class ElementKind(object):
    MATERIAL = "Material"
    IMAGE = "ImageType"
    OTHER = "Element"


class ParameterDefinition(object):
    """Host-agnostic view of one family parameter definition."""

    def __init__(
        self,
        name,
        group,
        storage_type,
        formula=None,
        is_instance=False,
        is_yes_no=False,
        handle=None,
    ):
        self.name = name
        self.group = group
        self.storage_type = storage_type
        self.formula = formula
        self.is_instance = is_instance
        self.is_yes_no = is_yes_no
        # Host object the source needs to resolve values (FamilyParameter in Revit)
        self.handle = handle

    @property
    def has_formula(self):
        return bool(self.formula)

    def __repr__(self):
        return "<ParameterDefinition {!r} group={!r} storage={!r}>".format(
            self.name, self.group, self.storage_type
        )


class ElementInfo(object):
    """Minimal description of an element referenced by an ElementId parameter."""

    def __init__(self, kind, name=None):
        self.kind = kind
        self.name = name


class ParameterRecord(object):
    """One exported CSV row before serialization."""

    def __init__(
        self,
        name,
        value,
        group,
        is_instance,
        description_field="",
        image_field="",
    ):
        self.name = name
        self.value = value
        self.group = group
        self.is_instance = bool(is_instance)
        self.description_field = description_field
        self.image_field = image_field

    def as_row(self, group_label=None):
        """Return the CSV fields in header order."""
        return [
            self.group if group_label is None else group_label,
            self.name,
            self.value,
            self.description_field,
            self.image_field,
            str(self.is_instance),
        ]

    def __eq__(self, other):
        if not isinstance(other, ParameterRecord):
            return NotImplemented
        return self.as_row() == other.as_row()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(tuple(self.as_row()))

    def __repr__(self):
        return "<ParameterRecord {!r}={!r} group={!r}>".format(self.name, self.value, self.group)


class ExportResult(object):
    """Summary of a finished export."""

    def __init__(self, path, row_count=0, skipped_formula=0, skipped_excluded=0, error_count=0):
        self.path = path
        self.row_count = row_count
        self.skipped_formula = skipped_formula
        self.skipped_excluded = skipped_excluded
        self.error_count = error_count

    def to_dict(self):
        return {
            "path": self.path,
            "row_count": self.row_count,
            "skipped_formula": self.skipped_formula,
            "skipped_excluded": self.skipped_excluded,
            "error_count": self.error_count,
        }
