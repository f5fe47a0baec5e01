# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""AuthCheck CLI."""

from __future__ import annotations

import argparse
import sys

from ..config import HttpSettings, load_http_settings
from ..endpoints import load_endpoints
from ..errors import ConfigurationError
from ..http import create_default_http_client
from ..log import setup_logging
from ..modes import MODE_DESCRIPTIONS, build_contexts
from ..report.console import ConsolePresenter
from ..runtime import AuthCheck
from ..version import __version__

_EPILOG = "modes:\n" + "\n".join(f"  {int(mode)}: {text}" for mode, text in MODE_DESCRIPTIONS.items()) + (
    "\n\nexamples:\n"
    '  authcheck -f endpoints.txt -mode 1 -c1 "session=abc123"\n'
    '  authcheck -f endpoints.txt -mode 2 -c1 "session=abc123" -c2 "session=xyz789"\n'
    '  authcheck -f endpoints.txt -mode 3 -t1 "eyJ0eXAi..."\n'
    '  authcheck -f endpoints.txt -mode 4 -t1 "eyJ0eXAi..." -t2 "eyKhbGci..."\n'
    "\nEndpoints answering HTTP 200 with the same body size under both contexts are reported."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authcheck",
        description="Compare HTTP responses under two authentication contexts to spot potential auth bypasses",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", dest="file", metavar="FILE", help="File containing endpoints (one per line)")
    parser.add_argument("-mode", type=int, metavar="N", help="Operation mode (1-4)")
    parser.add_argument("-c1", dest="cookie1", metavar="COOKIE", help="First cookie header")
    parser.add_argument("-c2", dest="cookie2", metavar="COOKIE", help="Second cookie header (mode 2)")
    parser.add_argument("-t1", dest="token1", metavar="TOKEN", help="First bearer token")
    parser.add_argument("-t2", dest="token2", metavar="TOKEN", help="Second bearer token (mode 4)")
    parser.add_argument("-version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Maximum concurrent comparison tasks (default: AUTHCHECK_WORKERS or 10)",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    parser.add_argument("--log-level", default=None, help="Logging level (default: AUTHCHECK_LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.file or not args.mode:
        parser.print_help()
        return 2

    try:
        context_a, context_b = build_contexts(
            args.mode,
            cookie1=args.cookie1,
            cookie2=args.cookie2,
            token1=args.token1,
            token2=args.token2,
        )
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        endpoints = load_endpoints(args.file)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.workers is not None and args.workers > 0:
        settings.max_workers = args.workers

    http_client = create_default_http_client(settings)
    presenter = ConsolePresenter(color=not args.no_color)

    try:
        with AuthCheck(http_client=http_client, settings=settings) as checker:
            checker.run(endpoints, context_a, context_b, presenter=presenter)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
