"""HTML table rows for the report templates.

Cell text is inserted verbatim so reports match the historical output
byte for byte.
"""

from typing import Iterable, Optional

from .models import OutcomeRecord

START_TABLE_ROW = '<tr class="active-row">'
END_TABLE_ROW = '</tr>'


def table_row(*cells: Optional[str]) -> str:
    """Build one row; None renders as an empty cell."""
    return START_TABLE_ROW + ''.join(f"<td>{cell or ''}</td>" for cell in cells) + END_TABLE_ROW


def is_diagnostic_mismatch(record: OutcomeRecord) -> bool:
    return record.format_errors is not None


def failure_row(record: OutcomeRecord) -> str:
    """
    Row for a failed test.

    Columns: file name, kind, expected line, actual line, expected output,
    actual output. Diagnostic-format mismatches put the absolute line in the
    actual-line column and the diagnostics in the actual-output column.
    """
    if is_diagnostic_mismatch(record):
        return table_row(record.file_name, record.kind,
                         None, record.line,
                         None, record.format_errors)
    return table_row(record.file_name, record.kind,
                     record.expected_line, record.actual_line,
                     record.expected_value, record.actual_value)


def skip_row(record: OutcomeRecord) -> str:
    return table_row(record.file_name, record.kind, record.line)


def error_kind_row(record: OutcomeRecord) -> str:
    """Columns: expected line, actual line, actual error message, expected error description."""
    return table_row(record.expected_line, record.actual_line,
                     record.actual_value, record.expected_value)


def render_rows(records: Iterable[OutcomeRecord], build_row) -> str:
    """Concatenate rows with no separator."""
    return ''.join(build_row(record) for record in records)
