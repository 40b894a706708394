# -*- coding: utf-8 -*-
import os

from pyrevit import forms, revit, script

from FamilyParameters.services import FamilyParameterExporter, load_export_settings, load_group_mapping
from FamilyParameters.services.revit_source import RevitFamilySource

doc = revit.doc
logger = script.get_logger()

CONFIG_SECTION = "family_parameters_export_config"


def _desktop_dir():
    home = os.environ.get("USERPROFILE") or os.path.expanduser("~")
    return os.path.join(home, "Desktop")


def print_summary(result):
    output = script.get_output()
    output.close_others()
    output.print_md("## ✅ Family Parameters Exported")
    output.print_md("* File: **{}**".format(result.path))
    output.print_md("* Parameters written: **{}**".format(result.row_count))
    output.print_md("* Skipped (formula): **{}**".format(result.skipped_formula))
    output.print_md("* Skipped (excluded names): **{}**".format(result.skipped_excluded))
    if result.error_count:
        output.print_md("* ⚠️ Values that could not be read: **{}**".format(result.error_count))


# -------------------------------------------------------------------------
# Main Execution
# -------------------------------------------------------------------------
def main():
    config = script.get_config(CONFIG_SECTION)
    settings = load_export_settings(getattr(config, "settings_path", "") or None, logger=logger)
    group_mapping = load_group_mapping(getattr(config, "mapping_path", "") or None, logger=logger)

    exporter = FamilyParameterExporter(RevitFamilySource(doc), settings, group_mapping, logger=logger)

    def choose_path(default_name):
        return forms.save_file(
            file_ext='csv',
            default_name=default_name,
            init_dir=_desktop_dir(),
            title=settings.message("save_title"),
        )

    outcome = exporter.run(choose_path)
    if outcome.succeeded:
        print_summary(outcome.result)
    forms.alert(outcome.message, title=outcome.title)


if __name__ == "__main__":
    main()
