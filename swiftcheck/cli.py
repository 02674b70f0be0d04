"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .checker import SwiftChecker
from .config import load_config
from .errors import CheckerError
from .reporter import AnalysisReporter

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swiftcheck",
        description="swiftcheck - Find quality issues in Swift source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All checks
  swiftcheck Sources/App/Model.swift

  # Only some checks
  swiftcheck Sources/App/Model.swift --check force_unwraps --check retain_cycles

  # Markdown report next to the working directory (Model.swift-report.md)
  swiftcheck Sources/App/Model.swift --report
        """
    )

    parser.add_argument("source_file", nargs="?", type=Path, help="Path to a Swift source file")
    parser.add_argument("--check", action="append", metavar="NAME", dest="checks",
                        help="Run only this check (repeatable)")
    parser.add_argument("--list-checks", action="store_true",
                        help="List the available checks in the order they run")
    parser.add_argument("--report", nargs="?", const="", metavar="PATH",
                        help="Write a detailed Markdown report (default: <file>-report.md)")
    parser.add_argument("--legacy-categories", action="store_true",
                        help="Categorize report entries by description keywords")
    parser.add_argument("--config", type=Path, metavar="FILE",
                        help="JSON file overriding thresholds and tables")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every issue as it is found")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR
    else:
        log_level = logging.WARNING
    logging.basicConfig(level=log_level, format="%(message)s")

    if args.list_checks:
        for name in SwiftChecker.available_checks():
            print(name)
        return 0

    if args.source_file is None:
        parser.print_help()
        return 1

    try:
        checker = SwiftChecker(load_config(args.config))
        if args.checks:
            issues = []
            for name in args.checks:
                issues.extend(checker.check(args.source_file, name))
        else:
            issues = checker.run_all_checks(args.source_file)
    except CheckerError as e:
        log.error("Error: %s", e)
        return 1

    reporter = AnalysisReporter(issues, args.source_file, legacy_categories=args.legacy_categories)
    for issue in issues:
        print(f"{args.source_file}:{issue} [{reporter.category_of(issue)}]")

    if args.report is not None:
        output_path = Path(args.report or f"{args.source_file.name}-report.md")
        try:
            reporter.save_report(output_path)
        except OSError as e:
            log.error("Error saving report: %s", e)
            return 1
        print(f"Report saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
