"""CLI entry point: argparse, config merge, review run."""

from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import load_config
from .discovery import find_test_files
from .fallbacks import print_error
from .output import print_json, print_no_files, print_run
from .review import review_files

logger = logging.getLogger(__name__)

USAGE_EXAMPLES = """
examples:
  playwright-review tests/
  playwright-review tests/login.spec.ts
  playwright-review --all path/to/review
  playwright-review --json --fail-under 7 tests/
"""


class _NoAbbrevArgumentParser(argparse.ArgumentParser):
    """Argparse parser variant that disables long-option abbreviation."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("allow_abbrev", False)
        super().__init__(*args, **kwargs)


def create_parser() -> argparse.ArgumentParser:
    parser = _NoAbbrevArgumentParser(
        prog="playwright-review",
        description="Playwright Code Review Agent — layer and reliability lint for test suites",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default=".",
                        help="File or directory to review (default: current directory)")
    parser.add_argument("--all", dest="include_js", action="store_true", default=None,
                        help="Review all test files including .js")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--exclude", action="append", default=None, metavar="PATTERN",
                        help="Path pattern to exclude (component/prefix match; repeatable)")
    parser.add_argument("--jobs", type=int, default=None, metavar="N",
                        help="Review N files in parallel (default: 1)")
    parser.add_argument("--fail-under", type=int, default=None, metavar="SCORE",
                        help="Exit 1 when any file scores below SCORE (0-10)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(debug: bool):
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def resolve_options(args: argparse.Namespace, config: dict) -> argparse.Namespace:
    """Fill unset CLI options from config. Explicit flags win."""
    if args.include_js is None:
        args.include_js = bool(config["include_js"])
    if args.jobs is None:
        args.jobs = config["jobs"]
    if args.fail_under is None:
        args.fail_under = config["fail_under"]
    args.exclude = list(config["exclude"]) + list(args.exclude or [])
    return args


def run(args: argparse.Namespace) -> int:
    """Review everything *args* points at; return the process exit code."""
    if args.jobs < 1:
        print_error(f"--jobs must be at least 1, got {args.jobs}")
        return 2
    if not 0 <= args.fail_under <= 10:
        print_error(f"--fail-under must be between 0 and 10, got {args.fail_under}")
        return 2

    files = find_test_files(args.path, include_js=args.include_js, exclusions=args.exclude)
    if not files:
        print_no_files()
        return 0
    logger.debug("Reviewing %d files under %s", len(files), args.path)

    summary = review_files(files, jobs=args.jobs)
    if args.json:
        print_json(summary)
    else:
        print_run(summary)

    if args.fail_under and summary.files_below(args.fail_under):
        return 1
    return 0


def main(argv: list[str] | None = None):
    parser = create_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.debug)
    resolve_options(args, load_config())

    try:
        code = run(args)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
