# -*- coding: utf-8 -*-
import copy

from FamilyParameters.models.errors import SettingsError


class TranslationMode(object):
    INLINE = "inline"
    REWRITE = "rewrite"

    @classmethod
    def all(cls):
        return [cls.INLINE, cls.REWRITE]


DEFAULT_EXCLUDED_NAMES = [
    u"Отметка по умолчанию",
    u"URL",
    u"Группа модели",
    u"Изготовитель",
    u"Изображение типоразмера",
    u"Ключевая пометка",
    u"Код по классификатору",
    u"Комментарии к типоразмеру",
    u"Описание",
    u"Стоимость",
    u"Ключ имени сечения",
    u"Огнестойкость",
]

DEFAULT_MESSAGES = {
    "error_title": u"Ошибка",
    "not_family_document": u"Скрипт работает только с документами семейств",
    "save_title": u"Сохранить файл как",
    "done_title": u"Выполнено",
    "done_message": u"Файл сохранен",
    "cancel_title": u"Отмена",
    "cancel_message": u"Операция была отменена пользователем.",
}

_STRING_KEYS = (
    "description_placeholder",
    "image_placeholder",
    "yes_no_literal",
    "encoding",
    "file_name_suffix",
    "timestamp_format",
)


class ExportSettings(object):
    DEFAULTS = {
        "excluded_names": DEFAULT_EXCLUDED_NAMES,
        "description_placeholder": u"Добавить описание",
        "image_placeholder": u"Добавить картинку",
        # Written for every yes/no parameter regardless of its 0/1 value
        "yes_no_literal": u"Да/Нет",
        "translation_mode": TranslationMode.INLINE,
        "encoding": "utf-8-sig",
        "file_name_suffix": "_FamilyParameters_",
        "timestamp_format": "%Y-%m-%d_%H-%M-%S",
        "messages": DEFAULT_MESSAGES,
    }

    def __init__(self, values=None):
        values = values or {}
        self._values = {}

        for key in self.DEFAULTS:
            self._values[key] = copy.deepcopy(self.DEFAULTS[key])
        for key in self.DEFAULTS:
            if key in values:
                self.set(key, values[key])

    def get(self, key):
        return self._values.get(key)

    def set(self, key, value):
        if key not in self.DEFAULTS:
            raise SettingsError("Unknown export setting: {}".format(key))

        if key == "translation_mode":
            if value not in TranslationMode.all():
                raise SettingsError("Invalid translation_mode: {}".format(value))

        if key == "excluded_names":
            if not isinstance(value, (list, tuple, set, frozenset)):
                raise SettingsError("excluded_names must be a list of parameter names")
            value = [self._require_text(key, name) for name in value]

        if key in _STRING_KEYS:
            value = self._require_text(key, value)

        if key == "messages":
            if not isinstance(value, dict):
                raise SettingsError("messages must be a mapping of message keys to text")
            merged = dict(self._values.get("messages") or DEFAULT_MESSAGES)
            for msg_key, text in value.items():
                merged[msg_key] = self._require_text("messages." + str(msg_key), text)
            value = merged

        self._values[key] = value

    def _require_text(self, key, value):
        if not isinstance(value, str):
            raise SettingsError("{} must be text, got {!r}".format(key, value))
        return value

    def message(self, key):
        return self._values["messages"].get(key, DEFAULT_MESSAGES.get(key, key))

    def to_dict(self):
        return copy.deepcopy(self._values)

    @classmethod
    def from_dict(cls, data):
        """Build settings from a loaded mapping; unknown keys are ignored."""
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise SettingsError("Export settings must be a mapping, got {}".format(type(data).__name__))
        known = dict((k, v) for k, v in data.items() if k in cls.DEFAULTS)
        return cls(known)

    def merged(self, data):
        """Return a copy with the keys of ``data`` applied on top."""
        updated = ExportSettings(self.to_dict())
        for key, value in (data or {}).items():
            if key in self.DEFAULTS:
                updated.set(key, value)
        return updated

# Attribute accessors ----------------------------------------

    @property
    def excluded_names(self):
        return frozenset(self._values["excluded_names"])

    @property
    def description_placeholder(self):
        return self._values["description_placeholder"]

    @property
    def image_placeholder(self):
        return self._values["image_placeholder"]

    @property
    def yes_no_literal(self):
        return self._values["yes_no_literal"]

    @property
    def translation_mode(self):
        return self._values["translation_mode"]

    @property
    def encoding(self):
        return self._values["encoding"]

    @property
    def file_name_suffix(self):
        return self._values["file_name_suffix"]

    @property
    def timestamp_format(self):
        return self._values["timestamp_format"]
