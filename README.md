# httpinger

Send a series of HTTP GET requests to a web server, show each result as it
arrives, and print a summary of latencies and status codes at the end.

Only the standard library is used.

## Installation

```
pip install .
```

This installs the `httpinger` command. The same command can also be run as
`python -m httpinger.cli`.

## Command line

```
httpinger --url www.example.com
httpinger --url www.example.com --insecure --count 10
httpinger --url www.example.com --count 100 --headers Content-Type,Server
httpinger --url www.example.com --sleep 10
httpinger www.example.com
```

Options:

- `--url URL` – the address to ping. Without a scheme (anything not starting
  with `http`), `https://` is added, or `http://` with `--insecure`. A URL given
  as a positional argument is used in place of `--url`.
- `--insecure` – use HTTP instead of HTTPS when a scheme is added.
- `--headers LIST` – comma-separated response header names whose values are
  shown for each request (empty when the server does not send them).
- `--user-agent VALUE` – the `User-Agent` header to send (default `httping`).
- `--count N` – number of requests to send (default 4).
- `--sleep SECONDS` – pause between requests (default 0).
- `-h`, `--help` – print the help text. It is also printed, with exit status
  0, when no URL is given.

Output starts with a tab-separated header row. Each following line shows the
local time, the request number, the URL, the status code, the latency in
milliseconds and the requested headers. When at least one request was made,
the run ends with the total number of requests and a summary: average,
maximum and minimum latency, counts for the status codes 200, 201, 204, 301,
302, 304, 400, 401, 403, 404, 500, 502, 503 and 504, and a count of all other
codes.

Press Ctrl+C (or send SIGTERM) to stop early: the summary still covers the
requests made so far, a cancellation message goes to standard error and the
exit status is 1. If a request cannot be sent (bad URL, connection or TLS
failure), the error is printed to standard error, the summary of earlier
requests is still written, and the exit status is 1. HTTP error statuses such
as 404 or 500 are not failures; they are recorded like any other response.

HTTPS certificates are verified, and proxy settings from the environment are
not used.

## Library use

```python
from httpinger.core import parse_url, make_request, calculate_statistics

url = parse_url("www.example.com", False)
responses = [make_request(False, "", url, "Server") for _ in range(3)]
print(calculate_statistics(responses))
```

`httpinger.core` provides:

- `parse_url(url, use_http)` – add `http://` or `https://` unless the URL
  already starts with `http`.
- `make_request(use_http, user_agent, url, headers)` – send one GET request
  and return an `HttpResponse` with `status`, `host` (the response's `Host`
  header, if any), `response_headers` (the headers named in the
  comma-separated `headers`) and `latency` in milliseconds. Raises
  `RequestError` when the request cannot be built or sent.
- `parse_header(headers)` – turn a header mapping into the compact text shown
  on each output line.
- `calculate_statistics(responses)` – return an `HTTPStatistics` with status
  code counts (`count_200` … `count_504`, `other`) and `average_latency`,
  `max_latency`, `min_latency`. `str()` of it gives the summary printed by the
  command. Raises `ValueError` for an empty list of responses.

`httpinger.cli` holds the command: `Config`, `build_parser()`, `usage(parser)`,
`run(config, out, stop_event)` (which raises `Cancelled` when `stop_event` is
set before all requests are sent) and `main(argv=None)`, which returns the
exit status.