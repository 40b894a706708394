# -*- coding: utf-8 -*-
"""
Loads the bundled export settings (YAML) and group mapping (JSON).

The mapping's key order is the group sort priority, so it is always read into
an OrderedDict. A missing mapping is a packaging defect and raises instead of
exporting unsorted, untranslated data.
"""

import io
import json
import os
from collections import OrderedDict

import yaml

from FamilyParameters.models.errors import MappingResourceError, SettingsError
from FamilyParameters.models.export_settings import ExportSettings

REFDATA_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "refdata"))
GROUP_MAPPINGS_PATH = os.path.join(REFDATA_DIR, "group_mappings.json")
EXPORT_SETTINGS_PATH = os.path.join(REFDATA_DIR, "export_settings.yaml")


def parse_group_mapping(text, path="<string>"):
    try:
        data = json.loads(text, object_pairs_hook=OrderedDict)
    except ValueError as ex:
        raise MappingResourceError(path, "invalid JSON ({})".format(ex))

    if not isinstance(data, dict):
        raise MappingResourceError(path, "top level must be an object")
    for key, label in data.items():
        if not isinstance(label, str):
            raise MappingResourceError(path, "label for '{}' is not text".format(key))
    return data


def load_group_mapping(path=None, logger=None):
    path = path or GROUP_MAPPINGS_PATH
    try:
        with io.open(path, "r", encoding="utf-8-sig") as handle:
            text = handle.read()
    except (IOError, OSError) as ex:
        if logger:
            logger.error("Group mapping resource not found: {}".format(path))
        raise MappingResourceError(path, ex.strerror or str(ex))

    mapping = parse_group_mapping(text, path)
    if logger:
        logger.debug("Loaded {} group mappings from {}".format(len(mapping), path))
    return mapping


def _read_yaml(path):
    with io.open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError("Settings file '{}' must contain a mapping".format(path))
    return data


def load_export_settings(override_path=None, logger=None):
    """Bundled settings, with the keys of ``override_path`` applied on top."""
    settings = ExportSettings.from_dict(_read_yaml(EXPORT_SETTINGS_PATH))
    if not override_path:
        return settings

    if not os.path.exists(override_path):
        if logger:
            logger.warning("Settings override '{}' not found; using bundled settings".format(override_path))
        return settings

    if logger:
        logger.debug("Applying settings override {}".format(override_path))
    return settings.merged(_read_yaml(override_path))


def load_settings_text(text):
    """Parse YAML settings text, as stored in a user override file."""
    data = yaml.safe_load(text) if text else None
    if data is None:
        return ExportSettings()
    return ExportSettings.from_dict(data)
