# -*- coding: utf-8 -*-
from FamilyParameters.models.parameter_record import ParameterRecord


SKIP_FORMULA = "formula"
SKIP_EXCLUDED = "excluded"


def skip_reason(definition, excluded_names):
    """Return why a parameter is left out of the export, or None to keep it."""
    if definition.has_formula:
        return SKIP_FORMULA
    if definition.name in excluded_names:
        return SKIP_EXCLUDED
    return None


class ParameterCollector(object):
    """Filters family parameters and turns the survivors into ParameterRecords."""

    def __init__(self, source, settings, normalizer, logger=None):
        self.source = source
        self.settings = settings
        self.normalizer = normalizer
        self.logger = logger
        self.skipped = {SKIP_FORMULA: 0, SKIP_EXCLUDED: 0}

    def collect(self):
        records = []
        excluded = self.settings.excluded_names
        self.skipped = {SKIP_FORMULA: 0, SKIP_EXCLUDED: 0}

        for definition in self.source.iter_parameters():
            reason = skip_reason(definition, excluded)
            if reason:
                self.skipped[reason] += 1
                if self.logger:
                    self.logger.debug("Skipping '{}' ({})".format(definition.name, reason))
                continue

            records.append(ParameterRecord(
                name=definition.name,
                value=self.normalizer.normalize(definition),
                group=str(definition.group),
                is_instance=definition.is_instance,
                description_field=self.settings.description_placeholder,
                image_field=self.settings.image_placeholder,
            ))

        return records
