import http.server
import io
import socket
import threading

import pytest

from httpinger.cli import Cancelled, Config, build_parser, main, run, usage
from httpinger.core import ERR_HTTP_CLIENT_DO


class _Handler(http.server.BaseHTTPRequestHandler):
    on_request = None

    def do_GET(self):
        callback = type(self).on_request
        if callback is not None:
            callback()
        self.send_response(418)
        self.send_header("host", "tester")
        self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server_url():
    _Handler.on_request = None
    server = http.server.ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    _Handler.on_request = None


def _closed_port_url():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}"


def test_build_parser_defaults():
    options = build_parser().parse_args([])
    assert options.count == 4
    assert options.sleep == 0
    assert options.url == ""
    assert options.use_http is False
    assert options.headers == ""
    assert options.user_agent == ""


def test_build_parser_values():
    options = build_parser().parse_args(
        ["--url", "example.com", "--insecure", "--count", "7", "--headers", "Server",
         "--user-agent", "probe", "--sleep", "2"]
    )
    assert (options.url, options.use_http, options.count) == ("example.com", True, 7)
    assert (options.headers, options.user_agent, options.sleep) == ("Server", "probe", 2)


def test_usage_lists_options(capsys):
    usage(build_parser())
    text = capsys.readouterr().out
    assert "Usage:" in text
    assert "httping [OPTIONS] --url URL" in text
    assert "--user-agent" in text
    assert "(default 4)" in text


def test_run_writes_lines_and_statistics(server_url):
    out = io.StringIO()
    run(Config(url=server_url, count=2, headers="host"), out, threading.Event())
    lines = out.getvalue().split("\n")
    assert lines[0] == "Time\tCount\tUrl\tResult\tTime\tHeaders"
    assert lines[1] == "-----\t-----\t---\t------\t----\t-------"
    assert "[ 1 ]" in lines[2] and "[ 418 ]" in lines[2]
    assert "[ 2 ]" in lines[3] and f"[ {server_url} ]" in lines[3]
    assert "host:tester" in lines[2]
    assert lines[4] == "Total Requests: 2"
    assert "Count of others: 2" in lines


def test_run_with_zero_count_prints_no_statistics(server_url):
    out = io.StringIO()
    run(Config(url=server_url, count=0), out, threading.Event())
    assert "Total Requests" not in out.getvalue()
    assert out.getvalue().count("\n") == 2


def test_run_cancelled_before_start(server_url):
    stop = threading.Event()
    stop.set()
    out = io.StringIO()
    with pytest.raises(Cancelled):
        run(Config(url=server_url, count=3), out, stop)
    assert "Total Requests" not in out.getvalue()


def test_run_cancelled_midway_prints_statistics(server_url):
    stop = threading.Event()
    _Handler.on_request = stop.set
    out = io.StringIO()
    with pytest.raises(Cancelled):
        run(Config(url=server_url, count=5), out, stop)
    text = out.getvalue()
    assert "Total Requests: 1" in text
    assert "Count of others: 1" in text


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "Examples:" in capsys.readouterr().out


def test_main_pings_server(server_url, capsys):
    assert main(["--url", server_url, "--count", "1", "--headers", "host"]) == 0
    text = capsys.readouterr().out
    assert "[ 418 ]" in text
    assert "host:tester" in text
    assert "Total Requests: 1" in text


def test_main_positional_url(server_url, capsys):
    assert main([server_url, "--count", "1"]) == 0
    assert f"[ {server_url} ]" in capsys.readouterr().out


def test_main_reports_request_failure(capsys):
    assert main(["--url", _closed_port_url(), "--count", "1"]) == 1
    assert ERR_HTTP_CLIENT_DO in capsys.readouterr().err