"""Pytest configuration and shared fixtures."""
import pytest

from conformance_report.collectors import OutcomeCollectors
from conformance_report.models import ReportConfig


SIMPLE_TEMPLATE = "<html><title>FileName</title><table><td></td></table><h1>FileName</h1></html>"


@pytest.fixture
def template_dir(tmp_path):
    """Directory holding minimal versions of the three report templates."""
    directory = tmp_path / "templates"
    directory.mkdir()
    for name in ("failed_tests_report_template.html",
                 "skipped_tests_report_template.html",
                 "error_kind_tests_report_template.html"):
        (directory / name).write_text(SIMPLE_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def report_dir(tmp_path):
    directory = tmp_path / "reports"
    directory.mkdir()
    return directory


@pytest.fixture
def config(template_dir, report_dir):
    return ReportConfig(template_dir=template_dir, report_dir=report_dir)


@pytest.fixture
def collectors():
    return OutcomeCollectors()


@pytest.fixture
def clean_report_env(monkeypatch):
    """Remove CONFORMANCE_REPORT_* variables that would leak into config."""
    for name in ("CONFORMANCE_REPORT_TEMPLATE_DIR", "CONFORMANCE_REPORT_DIR"):
        monkeypatch.delenv(name, raising=False)
