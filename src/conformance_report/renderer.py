"""Renders collected test outcomes into HTML report files."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .collectors import OutcomeCollectors
from .errors import ReportNameError, ReportWriteError
from .models import OutcomeRecord, ReportConfig
from .rows import error_kind_row, failure_row, render_rows, skip_row
from .templates import TemplateLoader, substitute_placeholders
from .logging_config import get_logger, log_exception

logger = get_logger(__name__)


def error_kind_report_name(file_name: str) -> str:
    """
    Base name of the source file up to, and excluding, the first '.'.

    Directories are dropped so every report lands directly in the report
    directory.

    Raises:
        ReportNameError: If nothing is left, as for '.hidden.bal'
    """
    report_name = Path(file_name).name.split('.', 1)[0]
    if not report_name:
        raise ReportNameError(f"Cannot derive a report name from source file '{file_name}'")
    return report_name


class ReportRenderer:
    """Turns the collectors of a finished run into zero or more HTML reports.

    One report is written for all failures, one for all skips, and one per
    source file that produced error-kind outcomes. Collectors with no records
    produce no file.
    """

    def __init__(self,
                 collectors: OutcomeCollectors,
                 config: Optional[ReportConfig] = None,
                 template_loader: Optional[TemplateLoader] = None):
        """
        Initialize renderer.

        Args:
            collectors: Outcomes recorded during the run
            config: Report configuration (defaults when None)
            template_loader: Template loader (built from config when None)
        """
        self.collectors = collectors
        self.config = config or ReportConfig()
        self.template_loader = template_loader or TemplateLoader(
            self.config.template_dir, self.config.encoding
        )

    @log_exception(logger, "Report generation failed")
    def generate_report(self) -> List[Path]:
        """
        Write every non-empty report kind.

        Report names are checked before anything is written, so a clash
        leaves the report directory untouched.

        Returns:
            Paths of the written reports, in write order

        Raises:
            ReportNameError: If an error-kind report has no usable name or shares one
            TemplateLoadError: If a needed template cannot be read
            ReportWriteError: If a report cannot be written
        """
        error_kind_reports = self.plan_error_kind_reports()

        written: List[Path] = []
        written.extend(self.generate_failed_tests_report())
        written.extend(self.generate_error_kind_reports(error_kind_reports))
        written.extend(self.generate_skipped_tests_report())

        if written:
            logger.info(f"Wrote {len(written)} report(s) to {self.config.report_dir}")
        else:
            logger.info("No failed, skipped or error-kind outcomes; no reports written")
        return written

    def plan_error_kind_reports(self) -> List[Tuple[str, Tuple[OutcomeRecord, ...]]]:
        """
        (report name, records) per error-kind group, in first-seen order.

        Raises:
            ReportNameError: If a name is empty, repeats another group's name, or
                matches a summary report written in the same run
        """
        taken: Dict[str, str] = {}
        if not self.collectors.failures.is_empty():
            taken[self.config.failed_report_name] = "the failed tests summary"
        if not self.collectors.skips.is_empty():
            taken[self.config.skipped_report_name] = "the skipped tests summary"

        planned = []
        for file_name, records in self.collectors.error_kinds.groups():
            report_name = error_kind_report_name(file_name)
            if report_name in taken:
                raise ReportNameError(
                    f"Error-kind report for '{file_name}' would overwrite {taken[report_name]} "
                    f"in {self.config.report_path(report_name)}",
                    path=self.config.report_path(report_name)
                )
            taken[report_name] = f"the error-kind report for '{file_name}'"
            planned.append((report_name, records))
        return planned

    def generate_failed_tests_report(self) -> List[Path]:
        failures = self.collectors.failures
        if failures.is_empty():
            return []
        template = self.template_loader.load(self.config.failed_template)
        rows = render_rows(failures.all(), failure_row)
        return [self._write_report(template, self.config.failed_report_name, rows)]

    def generate_error_kind_reports(
            self,
            planned: Optional[List[Tuple[str, Tuple[OutcomeRecord, ...]]]] = None) -> List[Path]:
        if planned is None:
            planned = self.plan_error_kind_reports()
        if not planned:
            return []
        template = self.template_loader.load(self.config.error_kind_template)
        written = []
        for report_name, records in planned:
            rows = render_rows(records, error_kind_row)
            written.append(self._write_report(template, report_name, rows))
        return written

    def generate_skipped_tests_report(self) -> List[Path]:
        skips = self.collectors.skips
        if skips.is_empty():
            return []
        template = self.template_loader.load(self.config.skipped_template)
        rows = render_rows(skips.all(), skip_row)
        return [self._write_report(template, self.config.skipped_report_name, rows)]

    def render(self, template: str, report_name: str, rows: str) -> str:
        return substitute_placeholders(
            template, rows, report_name,
            rows_marker=self.config.rows_marker,
            name_marker=self.config.name_marker,
        )

    def _write_report(self, template: str, report_name: str, rows: str) -> Path:
        """Render and write one report, overwriting any previous file."""
        report_path = self.config.report_path(report_name)
        content = self.render(template, report_name, rows)
        try:
            with open(report_path, 'w', encoding=self.config.encoding) as f:
                f.write(content)
        except OSError as e:
            raise ReportWriteError(
                f"Could not write report {report_path}: {e}", path=report_path
            ) from e

        logger.info(f"Wrote report {report_path}")
        return report_path
