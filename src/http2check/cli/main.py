# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""http2check CLI."""

from __future__ import annotations

import argparse

from ..config import DEFAULT_TARGET, VERSION_STRING, load_output_settings, load_probe_settings
from ..errors import Http2CheckError
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import OutcomeKind, ProbeReport
from ..runtime import Http2Check
from .output import TextOutput


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="http2check",
        usage="http2check [URI]",
        description="Check if a given webserver is using HTTP/2",
    )
    parser.add_argument("url", nargs="?", default=DEFAULT_TARGET, metavar="URI", help=f"Target host or URL (default: {DEFAULT_TARGET})")
    parser.add_argument("--version", action="store_true", help="Show application name and version")
    parser.add_argument("-q", "--quiet", action="store_true", help="Don't write to standard out")
    return parser


class ConsoleObserver:
    """Prints probe progress lines."""

    def __init__(self, out: TextOutput):
        self.out = out

    def zone_stripped(self, zone: str) -> None:
        self.out.println(self.out.dark_gray(f'ignoring "%{zone}"'))

    def request_started(self, url: str) -> None:
        self.out.println(self.out.dark_gray("GET"), " ", self.out.light_cyan(url))

    def retrying_as_ipv6(self, url: str) -> None:
        self.out.println(self.out.light_yellow("IPv6"), " ", self.out.dark_gray(url))


def render_report(out: TextOutput, report: ProbeReport) -> None:
    outcome = report.outcome
    if outcome.result is not None:
        out.message("protocol", out.white(outcome.result.protocol))
        out.message("status", out.white(outcome.result.status_line))
        return
    if outcome.kind is OutcomeKind.UNCLASSIFIED:
        out.error(outcome.detail or "")
        return
    out.message(outcome.category or "error", out.dark_red(outcome.label or str(outcome.kind)), outcome.extra)


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    out = TextOutput(load_output_settings(quiet=args.quiet))
    if args.version:
        out.println(VERSION_STRING)
        return 0

    settings = load_probe_settings()
    http_client = create_default_http_client(settings)
    try:
        with Http2Check(http_client=http_client, settings=settings, observer=ConsoleObserver(out)) as checker:
            report = checker.check(args.url)
    except Http2CheckError as exc:
        out.error(str(exc))
        return 1

    render_report(out, report)
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
