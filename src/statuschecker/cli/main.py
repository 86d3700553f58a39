# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""statuschecker CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import threading
from typing import Any, TextIO

from ..config import CheckerSettings, load_settings
from ..errors import ConfigurationError
from ..inputs import load_urls
from ..log import setup_logging
from ..models import ProbeOutcome
from ..report import format_outcome, outcomes_to_json, summarize, write_json_report
from ..runtime import StatusChecker

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REPORT_ERROR = 1
EXIT_USAGE = 2


def build_parser(settings: CheckerSettings | None = None) -> argparse.ArgumentParser:
    defaults = settings or CheckerSettings()
    parser = argparse.ArgumentParser(
        prog="statuschecker",
        description="Probe a list of URLs in parallel and report status code and latency for each.",
    )
    parser.add_argument("urls", nargs="*", metavar="URL", help="URLs to check (appended after --file entries)")
    parser.add_argument("--file", dest="file_path", help="File with one URL per line; blank lines and # comments are skipped")
    parser.add_argument("--workers", type=int, default=defaults.workers, help=f"Concurrent workers (default: {defaults.workers})")
    parser.add_argument("--timeout", type=float, default=defaults.timeout, help=f"Per-attempt timeout in seconds (default: {defaults.timeout:g})")
    parser.add_argument("--retries", type=int, default=defaults.retries, help=f"Extra attempts on transport failure (default: {defaults.retries})")
    parser.add_argument("--output", default=defaults.output_path, help=f"JSON report path (default: {defaults.output_path})")
    parser.add_argument("--json", action="store_true", help="Print JSON records to stdout instead of the summary line")
    parser.add_argument("--quiet", action="store_true", help="Suppress per-URL progress lines")
    parser.add_argument("--log-level", default=None, help="Logging level (default: STATUSCHECKER_LOG_LEVEL or WARNING)")
    parser.add_argument("--ignore-ssl-errors", action="store_true", help="Skip TLS verification")
    return parser


def _progress_printer(stream: TextIO):
    lock = threading.Lock()

    def _print(outcome: ProbeOutcome) -> None:
        line = format_outcome(outcome)
        with lock:
            print(line, file=stream, flush=True)

    return _print


def _print_json(records: list[dict[str, Any]]) -> None:
    json.dump(records, sys.stdout, indent=2)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    try:
        urls = load_urls(args.file_path, args.urls)
        checker = StatusChecker(settings)
        outcomes = checker.check(
            urls,
            workers=args.workers,
            timeout=args.timeout,
            retries=args.retries,
            on_outcome=None if args.quiet else _progress_printer(sys.stderr if args.json else sys.stdout),
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    try:
        path = write_json_report(outcomes, args.output)
    except OSError as exc:
        print(f"Failed to write {args.output}: {exc}", file=sys.stderr)
        return EXIT_REPORT_ERROR

    if args.json:
        _print_json(outcomes_to_json(outcomes))
    else:
        print(summarize(outcomes))
        print(f"Successfully wrote {path}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
