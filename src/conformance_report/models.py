"""Pydantic models for outcome records and report configuration."""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from pydantic import BaseModel, Field, model_validator


DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "report_templates"
DEFAULT_REPORT_DIR = Path("build") / "reports"
HTML_EXTENSION = ".html"


class OutcomeField(str, Enum):
    """Keys the test runner uses for outcome record fields."""
    FILE_NAME = "fileName"
    KIND = "kind"
    LINE = "line"
    ACTUAL_LINE = "actualLine"
    EXPECTED_LINE = "expectedLine"
    ACTUAL_VALUE = "actualValue"
    EXPECTED_VALUE = "expectedValue"
    FORMAT_ERRORS = "formatErrors"


class OutcomeRecord(BaseModel):
    """One test case's recorded result.

    Every field is optional; a missing field renders as an empty cell.
    Numbers handed in by the runner (line numbers mostly) are stored as text.
    """
    file_name: Optional[str] = Field(None, alias=OutcomeField.FILE_NAME.value)
    kind: Optional[str] = Field(None, alias=OutcomeField.KIND.value)
    line: Optional[str] = Field(None, alias=OutcomeField.LINE.value)
    actual_line: Optional[str] = Field(None, alias=OutcomeField.ACTUAL_LINE.value)
    expected_line: Optional[str] = Field(None, alias=OutcomeField.EXPECTED_LINE.value)
    actual_value: Optional[str] = Field(None, alias=OutcomeField.ACTUAL_VALUE.value)
    expected_value: Optional[str] = Field(None, alias=OutcomeField.EXPECTED_VALUE.value)
    format_errors: Optional[str] = Field(None, alias=OutcomeField.FORMAT_ERRORS.value)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
        "extra": "ignore",
    }

    @classmethod
    def from_dict(cls, data: Union['OutcomeRecord', Mapping[str, Any]]) -> 'OutcomeRecord':
        """Create a record from a mapping keyed by wire keys or attribute names."""
        if isinstance(data, cls):
            return data
        return cls.model_validate(dict(data))

    def to_dict(self) -> Dict[str, str]:
        """Convert to a mapping keyed by wire keys, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def get(self, key: Union[str, OutcomeField]) -> Optional[str]:
        """Read a field by wire key or attribute name; None when absent."""
        if isinstance(key, OutcomeField):
            key = key.value
        name = _ALIAS_TO_ATTRIBUTE.get(key, key)
        if name not in type(self).model_fields:
            return None
        return getattr(self, name)


_ALIAS_TO_ATTRIBUTE = {
    info.alias: name for name, info in OutcomeRecord.model_fields.items()
}


class ReportConfig(BaseModel):
    """Where templates live, where reports go, and how templates are filled."""
    template_dir: Path = Field(default=DEFAULT_TEMPLATE_DIR)
    report_dir: Path = Field(default=DEFAULT_REPORT_DIR)
    failed_template: str = Field("failed_tests_report_template.html", min_length=1)
    skipped_template: str = Field("skipped_tests_report_template.html", min_length=1)
    error_kind_template: str = Field("error_kind_tests_report_template.html", min_length=1)
    failed_report_name: str = Field("failed_tests_summary", min_length=1)
    skipped_report_name: str = Field("skipped_tests_summary", min_length=1)
    rows_marker: str = Field("<td></td>", min_length=1)
    name_marker: str = Field("FileName", min_length=1)
    encoding: str = "utf-8"

    model_config = {"frozen": True}

    @model_validator(mode='after')
    def markers_must_differ(self):
        if self.rows_marker == self.name_marker:
            raise ValueError('rows_marker and name_marker must be different')
        return self

    @model_validator(mode='after')
    def summary_names_must_differ(self):
        if self.failed_report_name == self.skipped_report_name:
            raise ValueError('failed_report_name and skipped_report_name must be different')
        return self

    @classmethod
    def from_env(cls, **overrides: Any) -> 'ReportConfig':
        """Build a config from CONFORMANCE_REPORT_* variables.

        Keyword overrides that are not None take precedence over the
        environment.
        """
        values: Dict[str, Any] = {}
        template_dir = os.getenv('CONFORMANCE_REPORT_TEMPLATE_DIR')
        if template_dir:
            values['template_dir'] = template_dir
        report_dir = os.getenv('CONFORMANCE_REPORT_DIR')
        if report_dir:
            values['report_dir'] = report_dir
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def report_path(self, report_name: str) -> Path:
        """Output file for a logical report name."""
        return self.report_dir / f"{report_name}{HTML_EXTENSION}"
