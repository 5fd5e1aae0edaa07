"""Command-line interface for rendering conformance test reports."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .errors import ReportError
from .models import ReportConfig
from .outcomes import load_outcomes
from .renderer import ReportRenderer
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='conformance-report',
        description='Render HTML reports from recorded conformance test outcomes',
        epilog="""
Examples:
  conformance-report outcomes.json
  conformance-report outcomes.json --report-dir build/reports --create-report-dir
  conformance-report outcomes.json --template-dir src/test/resources/report
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'outcomes',
        help='JSON file with failed, skipped and errorKind outcomes'
    )

    parser.add_argument(
        '--template-dir',
        metavar='DIR',
        help='Directory holding the report templates (default: bundled templates)'
    )

    parser.add_argument(
        '--report-dir',
        metavar='DIR',
        help='Directory the reports are written to (default: build/reports)'
    )

    parser.add_argument(
        '--create-report-dir',
        action='store_true',
        help='Create the report directory if it does not exist'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: CONFORMANCE_REPORT_LOG_LEVEL or INFO)'
    )

    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Emit structured JSON log lines'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(log_level=args.log_level, enable_json=args.json_logs)
        config = ReportConfig.from_env(
            template_dir=args.template_dir,
            report_dir=args.report_dir,
        )
        collectors = load_outcomes(args.outcomes)

        if args.create_report_dir:
            Path(config.report_dir).mkdir(parents=True, exist_ok=True)

        written = ReportRenderer(collectors, config).generate_report()
    except (ReportError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Could not create report directory: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not written:
        print("No failed, skipped or error-kind outcomes; nothing to report")
    for report_path in written:
        print(report_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
