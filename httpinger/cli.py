"""Command line front end: ping a web server and print statistics."""

from __future__ import annotations

import argparse
import signal
import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import TextIO

from httpinger.core import (
    HttpResponse,
    RequestError,
    calculate_statistics,
    make_request,
    parse_header,
    parse_url,
)

_OPTIONS = (
    ("--url", "string", "Specify the URL to ping. (required)", None),
    ("--insecure", "", "Use HTTP instead of HTTPS. By default, HTTPS is used.", None),
    ("--headers", "string",
     "A comma-separated list of response headers to include in the output.", None),
    ("--user-agent", "string",
     "The user-agent value to include in the request headers.", None),
    ("--count", "int", "Set the number of pings to send. Default is 4.", "4"),
    ("--sleep", "int",
     "Set the delay (in seconds) between successive pings. Default is 0 (no delay).",
     None),
)


class Cancelled(Exception):
    """Raised when a run is stopped before all pings were sent."""

    def __init__(self, message: str = "operation cancelled") -> None:
        super().__init__(message)


@dataclass
class Config:
    """Settings for one run."""

    url: str
    use_http: bool = False
    count: int = 4
    headers: str = ""
    sleep: int = 0
    user_agent: str = ""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(prog="httping", add_help=False)
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("--url", default="")
    parser.add_argument("--insecure", dest="use_http", action="store_true")
    parser.add_argument("--headers", default="")
    parser.add_argument("--user-agent", dest="user_agent", default="")
    parser.add_argument("--count", type=int, default=4)
    parser.add_argument("--sleep", type=int, default=0)
    parser.add_argument("args", nargs="*")
    return parser


def usage(parser: argparse.ArgumentParser) -> None:
    """Print the help text."""
    prog = parser.prog
    print(f"{prog}: A tool to 'ping' a web server and display response statistics.")
    print("\nUsage:")
    print(f"  {prog} [OPTIONS] --url URL")
    print("\nExamples:")
    print(f"  {prog} --url www.google.com")
    print(f"  {prog} --url www.google.com --insecure --count 10")
    print(f"  {prog} --url www.google.com --count 100 --headers Content-Type,Server")
    print(f"  {prog} --url www.google.com --sleep 10")
    print("Options:")
    for flag, kind, text, default in _OPTIONS:
        left = f"      {flag} {kind}".rstrip()
        suffix = f" (default {default})" if default is not None else ""
        print(f"{left:<26}  {text}{suffix}")


def _timestamp() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        return stamp[:-6] + "Z"
    return stamp


def _flush(out: TextIO) -> None:
    flush = getattr(out, "flush", None)
    if flush is not None:
        flush()


def run(config: Config, out: TextIO, stop_event: threading.Event) -> None:
    """Ping ``config.url`` repeatedly, writing a line per response to ``out``.

    Statistics are written once at the end, also when the run is cut short
    by ``stop_event`` (raising Cancelled) or by a failed request.
    """
    responses: list[HttpResponse] = []
    try:
        out.write("Time\tCount\tUrl\tResult\tTime\tHeaders\n")
        out.write("-----\t-----\t---\t------\t----\t-------\n")
        for number in range(1, config.count + 1):
            if stop_event.is_set():
                raise Cancelled()
            response = make_request(
                config.use_http, config.user_agent, config.url, config.headers
            )
            responses.append(response)
            header_values = parse_header(response.response_headers or {})
            out.write(
                f"[ {_timestamp()} ]\t[ {number} ]\t[ {config.url} ]\t"
                f"[ {response.status} ]\t[ {response.latency}ms ]\t"
                f"[ {header_values} ]\n"
            )
            _flush(out)
            if config.sleep:
                stop_event.wait(config.sleep)
    finally:
        if responses:
            out.write(f"Total Requests: {len(responses)}\n")
            out.write(f"{calculate_statistics(responses)}\n")
        _flush(out)


def main(argv: list[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    parser = build_parser()
    options = parser.parse_args(argv)

    if options.help or (not options.args and not options.url):
        usage(parser)
        return 0

    target = options.args[0] if options.args else options.url
    config = Config(
        url=parse_url(target, options.use_http),
        use_http=options.use_http,
        count=options.count,
        headers=options.headers,
        sleep=options.sleep,
        user_agent=options.user_agent,
    )

    stop_event = threading.Event()
    previous = {}
    if threading.current_thread() is threading.main_thread():
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[signum] = signal.signal(
                signum, lambda _signum, _frame: stop_event.set()
            )
    try:
        run(config, sys.stdout, stop_event)
    except (Cancelled, RequestError) as exc:
        print(exc, file=sys.stderr)
        return 1
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())