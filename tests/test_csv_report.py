# -*- coding: utf-8 -*-
"""Unit tests for CSV report writing and group translation."""
import codecs
import csv
import datetime
import io
import os
import shutil
import sys
import tempfile
import unittest
from collections import OrderedDict

CURRENT_DIR = os.path.dirname(__file__)
LIB_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "ParametersFromFamily.extension", "lib"))
if LIB_PATH not in sys.path:
    sys.path.insert(0, LIB_PATH)

from FamilyParameters.domain.csv_report import (
    HEADER,
    build_file_name,
    format_row,
    read_report,
    translate_report_groups,
    write_report,
)
from FamilyParameters.models.parameter_record import ParameterRecord


def _record(name, value, group="PG_TEXT", is_instance=False):
    return ParameterRecord(name, value, group, is_instance, u"Добавить описание", u"Добавить картинку")


class FormatRowTests(unittest.TestCase):

    def test_plain_and_empty_fields_stay_unquoted(self):
        self.assertEqual(format_row(["G", "plain", "0", "", "", "False"]), "G,plain,0,,,False\r\n")

    def test_special_characters_are_quoted(self):
        self.assertEqual(format_row(["a,b"]), '"a,b"\r\n')
        self.assertEqual(format_row(['say "hi"']), '"say ""hi"""\r\n')
        self.assertEqual(format_row(["two\nlines"]), '"two\nlines"\r\n')
        self.assertEqual(format_row(["c\rd"]), '"c\rd"\r\n')


class WriteReportTests(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp_dir, "report.csv")

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def _raw(self):
        with open(self.path, "rb") as handle:
            return handle.read()

    def test_header_and_row_layout(self):
        count = write_report(self.path, [_record("Width", "12.35", "PG_GEOMETRY", True)])
        self.assertEqual(count, 1)

        text = self._raw().decode("utf-8-sig")
        self.assertEqual(
            text,
            u"Group,Name,Value,DescriptionField,ImageField,IsInstance\r\n"
            u"PG_GEOMETRY,Width,12.35,Добавить описание,Добавить картинку,True\r\n",
        )

    def test_file_starts_with_utf8_bom(self):
        write_report(self.path, [])
        self.assertTrue(self._raw().startswith(codecs.BOM_UTF8))

    def test_tricky_value_survives_a_standard_csv_reader(self):
        tricky = u'3/4", 1" and\nmore'
        write_report(self.path, [_record("Size", tricky)])

        with io.open(self.path, "r", encoding="utf-8-sig", newline="") as handle:
            rows = list(csv.reader(handle))

        self.assertEqual(rows[0], HEADER)
        self.assertEqual(len(rows), 2)
        self.assertEqual(rows[1][2], tricky)
        self.assertIn(u'"3/4"", 1"" and\nmore"', self._raw().decode("utf-8-sig"))

    def test_quoting_of_mixed_rows_is_exact(self):
        records = [
            ParameterRecord("a \"q\", b", "", "PG_TEXT", True, "x\ny", "c\rd"),
            ParameterRecord("plain", "0", "G", False, "", ""),
        ]
        write_report(self.path, records)

        self.assertEqual(
            self._raw(),
            codecs.BOM_UTF8
            + b"Group,Name,Value,DescriptionField,ImageField,IsInstance\r\n"
            + b'PG_TEXT,"a ""q"", b",,"x\ny","c\rd",True\r\n'
            + b"G,plain,0,,,False\r\n",
        )

    def test_inline_mapping_translates_known_groups_only(self):
        mapping = OrderedDict([("PG_TEXT", u"Текст")])
        write_report(self.path, [_record("A", "1"), _record("B", "2", "PG_OTHER")], group_mapping=mapping)
        rows = read_report(self.path)
        self.assertEqual([row[0] for row in rows[1:]], [u"Текст", "PG_OTHER"])


class TranslateReportTests(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmp_dir, "report.csv")

    def tearDown(self):
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def _lines(self):
        with open(self.path, "rb") as handle:
            return handle.read().split(b"\r\n")

    def test_mapped_group_is_replaced_and_others_stay_byte_identical(self):
        records = [
            _record("Label", "x"),
            _record("Note", 'a "quoted", value', "PG_UNMAPPED"),
        ]
        write_report(self.path, records)
        before = self._lines()

        translated = translate_report_groups(self.path, {"PG_TEXT": u"Текст"})
        after = self._lines()

        self.assertEqual(translated, 1)
        self.assertEqual(len(after), len(before))
        self.assertEqual(after[0], before[0])
        self.assertTrue(after[1].decode("utf-8").startswith(u"Текст,Label,x,"))
        self.assertEqual(after[2], before[2])

    def test_header_is_never_translated(self):
        write_report(self.path, [_record("Label", "x")])
        translate_report_groups(self.path, {"Group": "Translated"})
        self.assertEqual(read_report(self.path)[0], HEADER)

    def test_quoted_commas_do_not_shift_columns(self):
        write_report(self.path, [_record("a,b", "c,d")])
        translate_report_groups(self.path, {"PG_TEXT": u"Текст"})
        rows = read_report(self.path)
        self.assertEqual(rows[1][:3], [u"Текст", "a,b", "c,d"])

    def test_matches_inline_translation(self):
        mapping = OrderedDict([("PG_TEXT", u"Текст"), ("PG_GEOMETRY", u"Размеры")])
        records = [
            _record("Width", "12.35", "PG_GEOMETRY", True),
            _record("Text", "multi\nline", "PG_TEXT"),
            _record("Other", "", "PG_DATA"),
        ]
        inline_path = os.path.join(self.tmp_dir, "inline.csv")
        write_report(inline_path, records, group_mapping=mapping)

        write_report(self.path, records)
        translate_report_groups(self.path, mapping)

        with open(inline_path, "rb") as inline, open(self.path, "rb") as rewritten:
            self.assertEqual(inline.read(), rewritten.read())


class FileNameTests(unittest.TestCase):

    def test_default_pattern(self):
        now = datetime.datetime(2024, 3, 5, 14, 7, 9)
        self.assertEqual(build_file_name("Door.rfa", now), "Door_FamilyParameters_2024-03-05_14-07-09.csv")

    def test_title_without_extension(self):
        now = datetime.datetime(2024, 12, 31, 23, 59, 0)
        self.assertEqual(
            build_file_name(u"Окно", now, suffix="_Params_"),
            u"Окно_Params_2024-12-31_23-59-00.csv",
        )


if __name__ == "__main__":
    unittest.main()
