# -*- coding: utf-8 -*-
"""
CSV serialization of the family parameter report.

Written with csv.writer and minimal quoting: a field is quoted only when it
contains a comma, a double quote or a line break, and empty values stay as
empty unquoted fields. Records end with CRLF.
"""

import csv
import io
import os

HEADER = ["Group", "Name", "Value", "DescriptionField", "ImageField", "IsInstance"]
LINE_TERMINATOR = "\r\n"
DEFAULT_ENCODING = "utf-8-sig"


def _writer(handle):
    return csv.writer(handle, lineterminator=LINE_TERMINATOR)


def format_row(fields):
    """Return one CSV record, terminator included, as write_report emits it."""
    buffer = io.StringIO()
    _writer(buffer).writerow(fields)
    return buffer.getvalue()


def write_report(path, records, encoding=DEFAULT_ENCODING, group_mapping=None):
    """
    Write the header and one row per record, in the given order.

    With ``group_mapping`` the group column is translated while writing;
    groups missing from the mapping keep their raw identifier.
    Returns the number of data rows written.
    """
    count = 0
    with io.open(path, "w", encoding=encoding, newline="") as handle:
        writer = _writer(handle)
        writer.writerow(HEADER)
        for record in records:
            label = group_mapping.get(record.group) if group_mapping else None
            writer.writerow(record.as_row(label))
            count += 1
    return count


def read_report(path, encoding=DEFAULT_ENCODING):
    with io.open(path, "r", encoding=encoding, newline="") as handle:
        return [row for row in csv.reader(handle)]


def translate_report_groups(path, group_mapping, encoding=DEFAULT_ENCODING):
    """
    Rewrite a written report in place, replacing mapped group identifiers in
    the first column with their labels. The header and every row whose group
    has no mapping come out unchanged. Returns the number of rows translated.
    """
    rows = read_report(path, encoding)
    if not rows:
        return 0

    translated = 0
    with io.open(path, "w", encoding=encoding, newline="") as handle:
        writer = _writer(handle)
        writer.writerow(rows[0])
        for row in rows[1:]:
            if row and row[0] in group_mapping:
                row[0] = group_mapping[row[0]]
                translated += 1
            writer.writerow(row)
    return translated


def build_file_name(document_title, now, suffix="_FamilyParameters_", timestamp_format="%Y-%m-%d_%H-%M-%S"):
    stem = os.path.splitext(os.path.basename(document_title or ""))[0]
    return u"{}{}{}.csv".format(stem, suffix, now.strftime(timestamp_format))
