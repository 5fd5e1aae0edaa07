"""Conformance Report - HTML reports for failed, skipped and error-kind conformance tests."""

__version__ = "1.0.0"

from .collectors import ErrorKindCollector, FailureCollector, OutcomeCollectors, SkipCollector
from .errors import (
    OutcomeFileError, ReportError, ReportNameError, ReportWriteError, TemplateLoadError
)
from .models import OutcomeField, OutcomeRecord, ReportConfig
from .outcomes import dump_outcomes, load_outcomes
from .renderer import ReportRenderer
from .templates import TemplateLoader

__all__ = [
    "FailureCollector",
    "SkipCollector",
    "ErrorKindCollector",
    "OutcomeCollectors",
    "OutcomeField",
    "OutcomeRecord",
    "ReportConfig",
    "ReportRenderer",
    "TemplateLoader",
    "load_outcomes",
    "dump_outcomes",
    "ReportError",
    "TemplateLoadError",
    "ReportWriteError",
    "ReportNameError",
    "OutcomeFileError",
]
