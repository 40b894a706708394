# -*- coding: utf-8 -*-
import io

import yaml
from pyrevit import forms, script

from FamilyParameters.models.errors import FamilyExportError
from FamilyParameters.services.settings_loader import load_group_mapping, load_settings_text

CONFIG_SECTION = "family_parameters_export_config"

OPT_SETTINGS = "Settings file (YAML)..."
OPT_MAPPING = "Group mapping file (JSON)..."
OPT_RESET = "Reset to bundled files"

logger = script.get_logger()


def _pick_settings(config):
    path = forms.pick_file(file_ext='yaml', title="Select export settings")
    if not path:
        return
    try:
        with io.open(path, "r", encoding="utf-8") as handle:
            load_settings_text(handle.read())
    except (FamilyExportError, yaml.YAMLError) as ex:
        forms.alert("Settings file is not valid:\n\n{}".format(ex), title="Export Family Parameters")
        return
    config.settings_path = path
    script.save_config()
    forms.alert("Settings override saved:\n{}".format(path), title="Export Family Parameters")


def _pick_mapping(config):
    path = forms.pick_file(file_ext='json', title="Select group mapping")
    if not path:
        return
    try:
        mapping = load_group_mapping(path, logger=logger)
    except FamilyExportError as ex:
        forms.alert(str(ex), title="Export Family Parameters")
        return
    config.mapping_path = path
    script.save_config()
    forms.alert("Group mapping saved ({} groups):\n{}".format(len(mapping), path), title="Export Family Parameters")


def main():
    config = script.get_config(CONFIG_SECTION)
    selected = forms.CommandSwitchWindow.show(
        [OPT_SETTINGS, OPT_MAPPING, OPT_RESET],
        message="Current settings: {}\nCurrent mapping: {}".format(
            getattr(config, "settings_path", "") or "<bundled>",
            getattr(config, "mapping_path", "") or "<bundled>",
        ),
    )
    if not selected:
        script.exit()

    if selected == OPT_SETTINGS:
        _pick_settings(config)
    elif selected == OPT_MAPPING:
        _pick_mapping(config)
    elif selected == OPT_RESET:
        config.settings_path = ""
        config.mapping_path = ""
        script.save_config()
        forms.alert("Bundled settings and group mapping restored.", title="Export Family Parameters")


if __name__ == "__main__":
    main()
