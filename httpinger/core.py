"""Send HTTP 'pings' to a web server and summarise the responses."""

from __future__ import annotations

import http.client
import ssl
import time
import urllib.error
import urllib.request
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Mapping

ERR_HTTP_NEW_REQUEST = "request setup::"
ERR_HTTP_CLIENT_DO = "request send::"

DEFAULT_USER_AGENT = "httping"

TRACKED_STATUS_CODES = (
    200, 201, 204, 301, 302, 304, 400, 401, 403, 404, 500, 502, 503, 504,
)


class RequestError(Exception):
    """Raised when a request cannot be built or sent."""


@dataclass
class HttpResponse:
    """The outcome of one HTTP request."""

    status: int = 0
    host: str = ""
    response_headers: dict[str, str] | None = field(default_factory=dict)
    latency: int = 0
    error: str = ""


@dataclass
class HTTPStatistics:
    """Aggregated status code counts and latency figures."""

    count_200: int = 0
    count_201: int = 0
    count_204: int = 0
    count_301: int = 0
    count_302: int = 0
    count_304: int = 0
    count_400: int = 0
    count_401: int = 0
    count_403: int = 0
    count_404: int = 0
    count_500: int = 0
    count_502: int = 0
    count_503: int = 0
    count_504: int = 0
    other: int = 0
    average_latency: int = 0
    max_latency: int = 0
    min_latency: int = 0

    def __str__(self) -> str:
        lines = [
            "",
            f"AverageLatency: {self.average_latency}ms",
            f"MaxLatency: {self.max_latency}ms",
            f"MinLatency: {self.min_latency}ms",
            "",
        ]
        lines.extend(
            f"Count of {code}s: {getattr(self, f'count_{code}')}"
            for code in TRACKED_STATUS_CODES
        )
        lines.append(f"Count of others: {self.other}")
        return "\n".join(lines) + "\n"


def parse_url(url: str, use_http: bool) -> str:
    """Prefix ``url`` with a scheme unless it already starts with "http"."""
    if url.startswith("http"):
        return url
    return ("http://" if use_http else "https://") + url


def _build_opener() -> urllib.request.OpenerDirector:
    # No proxies are taken from the environment; certificates are verified.
    return urllib.request.build_opener(
        urllib.request.ProxyHandler({}),
        urllib.request.HTTPSHandler(context=ssl.create_default_context()),
    )


def make_request(
    use_http: bool, user_agent: str, url: str, headers: str
) -> HttpResponse:
    """Send a GET request to ``url`` and describe the response.

    ``headers`` is a comma-separated list of response header names whose
    values are collected. Raises RequestError if the request fails.
    """
    if not user_agent:
        user_agent = DEFAULT_USER_AGENT

    try:
        request = urllib.request.Request(url, method="GET")
    except ValueError as exc:
        raise RequestError(f"{ERR_HTTP_NEW_REQUEST}{exc}") from exc
    request.add_header("User-Agent", user_agent)

    opener = _build_opener()
    start = time.monotonic()
    try:
        response = opener.open(request)
    except urllib.error.HTTPError as exc:
        response = exc
    except (OSError, http.client.HTTPException, ValueError) as exc:
        raise RequestError(f"{ERR_HTTP_CLIENT_DO}{exc}") from exc
    latency = int((time.monotonic() - start) * 1000)

    try:
        status = response.getcode()
        reply_headers = response.headers
        collected = {name: reply_headers.get(name, "") for name in headers.split(",")}
        host = reply_headers.get("host", "")
        response.read()
    finally:
        response.close()

    return HttpResponse(
        status=status,
        host=host,
        response_headers=collected,
        latency=latency,
    )


def parse_header(headers: Mapping[str, str]) -> str:
    """Format header names and values for display."""
    if len(headers) > 1:
        return "".join(f" {{{name}:{value}}} " for name, value in headers.items())
    return "".join(f" {name}:{value} " for name, value in headers.items())


def calculate_statistics(responses: Iterable[HttpResponse]) -> HTTPStatistics:
    """Summarise status codes and latencies of ``responses``."""
    responses = list(responses)
    if not responses:
        raise ValueError("cannot calculate statistics of no responses")

    counts = Counter(response.status for response in responses)
    total_latency = 0
    max_latency = 0
    min_latency = 0
    for response in responses:
        total_latency += response.latency
        max_latency = max(max_latency, response.latency)
        if min_latency == 0 or response.latency < min_latency:
            min_latency = response.latency

    other = sum(
        count for code, count in counts.items() if code not in TRACKED_STATUS_CODES
    )
    return HTTPStatistics(
        **{f"count_{code}": counts[code] for code in TRACKED_STATUS_CODES},
        other=other,
        average_latency=total_latency // len(responses),
        max_latency=max_latency,
        min_latency=min_latency,
    )