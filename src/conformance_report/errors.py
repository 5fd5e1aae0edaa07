"""Exceptions raised while collecting outcomes and writing reports."""

from pathlib import Path
from typing import Optional, Union


class ReportError(Exception):
    """Base class for report generation failures."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class TemplateLoadError(ReportError):
    """A report template is missing, unreadable or not decodable."""


class ReportWriteError(ReportError):
    """A rendered report could not be written to the report directory."""


class OutcomeFileError(ReportError):
    """A recorded outcome file could not be read or failed validation."""


class ReportNameError(ReportError):
    """A source file name gives no usable report name, or two reports would share one."""
