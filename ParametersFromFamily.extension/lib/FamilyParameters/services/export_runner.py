# -*- coding: utf-8 -*-
import datetime

from FamilyParameters.domain.collector import SKIP_EXCLUDED, SKIP_FORMULA, ParameterCollector
from FamilyParameters.domain.csv_report import build_file_name, translate_report_groups, write_report
from FamilyParameters.domain.ordering import order_records
from FamilyParameters.domain.value_normalizer import ValueNormalizer
from FamilyParameters.models.errors import NotFamilyDocumentError
from FamilyParameters.models.export_settings import TranslationMode
from FamilyParameters.models.parameter_record import ExportResult


class ExportStatus(object):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"


class ExportOutcome(object):
    """Terminal state of one command run plus the dialog to show for it."""

    def __init__(self, status, title, message, result=None):
        self.status = status
        self.title = title
        self.message = message
        self.result = result

    @property
    def succeeded(self):
        return self.status == ExportStatus.SUCCEEDED


class FamilyParameterExporter(object):
    """Runs collect -> normalize -> order -> write for one family document."""

    def __init__(self, source, settings, group_mapping, logger=None):
        self.source = source
        self.settings = settings
        self.group_mapping = group_mapping
        self.logger = logger
        self.normalizer = ValueNormalizer(source, settings, logger)
        self.collector = ParameterCollector(source, settings, self.normalizer, logger)

    def check_document(self):
        if not self.source.is_family_document():
            raise NotFamilyDocumentError(self.settings.message("not_family_document"))

    def build_records(self):
        records = self.collector.collect()
        return order_records(records, self.group_mapping)

    def default_file_name(self, now=None):
        now = now or datetime.datetime.now()
        return build_file_name(
            self.source.document_title(),
            now,
            suffix=self.settings.file_name_suffix,
            timestamp_format=self.settings.timestamp_format,
        )

    def export(self, path, records=None):
        if records is None:
            records = self.build_records()

        encoding = self.settings.encoding
        if self.settings.translation_mode == TranslationMode.REWRITE:
            row_count = write_report(path, records, encoding)
            translated = translate_report_groups(path, self.group_mapping, encoding)
            if self.logger:
                self.logger.debug("Translated {} of {} group labels in place".format(translated, row_count))
        else:
            row_count = write_report(path, records, encoding, self.group_mapping)

        result = ExportResult(
            path,
            row_count=row_count,
            skipped_formula=self.collector.skipped[SKIP_FORMULA],
            skipped_excluded=self.collector.skipped[SKIP_EXCLUDED],
            error_count=self.normalizer.error_count,
        )
        if self.logger:
            self.logger.info("Exported {} parameters to {} ({} mode)".format(
                row_count, path, self.settings.translation_mode))
        return result

    def run(self, choose_path, now=None):
        """
        Execute the whole command. ``choose_path`` receives the suggested file
        name and returns the chosen path, or None when the user cancels.
        """
        try:
            self.check_document()
        except NotFamilyDocumentError as ex:
            return ExportOutcome(ExportStatus.FAILED, self.settings.message("error_title"), str(ex))

        records = self.build_records()

        path = choose_path(self.default_file_name(now))
        if not path:
            return ExportOutcome(
                ExportStatus.CANCELLED,
                self.settings.message("cancel_title"),
                self.settings.message("cancel_message"),
            )

        result = self.export(path, records)
        return ExportOutcome(
            ExportStatus.SUCCEEDED,
            self.settings.message("done_title"),
            self.settings.message("done_message"),
            result,
        )
