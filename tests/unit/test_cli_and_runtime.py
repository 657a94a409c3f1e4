# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io

import pytest

from http2check.cli import main as cli_main
from http2check.cli.main import build_parser
from http2check import runtime as runtime_module
from http2check.cli.output import TextOutput
from http2check.config import DEFAULT_TARGET, OutputSettings, ProbeSettings
from http2check.errors import RequestConstructionError
from http2check.http import url as url_module
from http2check.http.adapters import StubHttpClient
from http2check.http.models import HttpResponse
from http2check.models import OutcomeKind
from http2check.runtime import Http2Check

H2_OK = HttpResponse(ok=True, status_code=200, reason_phrase="OK", http_version="HTTP/2")


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setattr(url_module, "list_interface_names", lambda: ["lo", "lo0"])


def _install_client(monkeypatch, client):
    monkeypatch.setattr(cli_main, "create_default_http_client", lambda settings=None: client)
    return client


def test_build_parser_defaults():
    parser = build_parser()
    args = parser.parse_args([])
    assert args.url == DEFAULT_TARGET
    assert args.quiet is False
    assert args.version is False

    args = parser.parse_args(["-q", "example.com"])
    assert args.url == "example.com"
    assert args.quiet is True


def test_version_flag(capsys):
    assert cli_main.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "http2check 0.6.0"


def test_http2_server_reports_protocol_and_status(monkeypatch, capsys):
    client = _install_client(monkeypatch, StubHttpClient({"https://twitter.com": H2_OK}))

    exit_code = cli_main.main(["twitter.com"])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["GET https://twitter.com", "[protocol] HTTP/2.0", "[status] 200 OK"]
    assert client.closed is True


def test_server_without_http2_is_reported(monkeypatch, capsys):
    failure = HttpResponse(ok=False, error_message="http2: unsupported scheme and no Fallback")
    _install_client(monkeypatch, StubHttpClient({"https://http1only.example": failure}))

    exit_code = cli_main.main(["http1only.example"])

    assert exit_code == 1
    assert capsys.readouterr().out.splitlines()[-1] == "[HTTP/2] Not supported"


def test_link_local_zone_is_stripped_and_announced(monkeypatch, capsys):
    client = _install_client(monkeypatch, StubHttpClient({"https://[::1]": H2_OK}))

    exit_code = cli_main.main(["::1%lo0"])

    assert exit_code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'ignoring "%lo0"'
    assert lines[1] == "GET https://[::1]"
    assert [r.url for r in client.requests] == ["https://[::1]"]


def test_host_down_shows_raw_detail(monkeypatch, capsys):
    failure = HttpResponse(ok=False, error_message="dial tcp 1.2.3.4:443: connection refused")
    _install_client(monkeypatch, StubHttpClient({"https://1.2.3.4": failure}))

    assert cli_main.main(["1.2.3.4"]) == 1
    assert capsys.readouterr().out.splitlines()[-1] == "[host] Down (dial tcp 1.2.3.4:443: connection refused)"


def test_unresolvable_host(monkeypatch, capsys):
    failure = HttpResponse(ok=False, error_message="dial tcp: lookup nowhere.invalid: no such host")
    _install_client(monkeypatch, StubHttpClient({"https://nowhere.invalid": failure}))

    assert cli_main.main(["nowhere.invalid"]) == 1
    assert capsys.readouterr().out.splitlines()[-1] == "[host] Down (host not found)"


def test_unclassified_error_goes_to_stderr_verbatim(monkeypatch, capsys):
    failure = HttpResponse(ok=False, error_message="stream 1 reset: PROTOCOL_ERROR")
    _install_client(monkeypatch, StubHttpClient({"https://example.com": failure}))

    assert cli_main.main(["example.com"]) == 1
    captured = capsys.readouterr()
    assert captured.err.strip() == "stream 1 reset: PROTOCOL_ERROR"
    assert "[" not in captured.out.splitlines()[-1]


def test_request_construction_error_is_fatal(monkeypatch, capsys):
    error = RequestConstructionError("invalid request target 'https://example.com:x': Invalid port: 'x'")
    client = _install_client(monkeypatch, StubHttpClient({"https://example.com:x": error}))

    assert cli_main.main(["example.com:x"]) == 1
    assert "Invalid port" in capsys.readouterr().err
    assert client.closed is True


def test_ipv6_retry_is_announced(monkeypatch, capsys):
    ambiguous = "https://2001:db8:0:0:0:0:0:1"
    failure = HttpResponse(ok=False, error_message="address 2001:db8:0:0:0:0:0:1: too many colons in address")
    _install_client(monkeypatch, StubHttpClient({ambiguous: failure, "https://[2001:db8:0:0:0:0:0:1]:443": H2_OK}))

    assert cli_main.main([ambiguous]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"GET {ambiguous}",
        "IPv6 https://[2001:db8:0:0:0:0:0:1]:443",
        "[protocol] HTTP/2.0",
        "[status] 200 OK",
    ]


def test_quiet_mode_prints_nothing(monkeypatch, capsys):
    failure = HttpResponse(ok=False, error_message="something odd")
    _install_client(monkeypatch, StubHttpClient({"https://example.com": failure}))

    assert cli_main.main(["-q", "example.com"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_runtime_report_and_close():
    client = StubHttpClient({"https://example.com": H2_OK})
    with Http2Check(http_client=client, interfaces=[]) as checker:
        report = checker.check("example.com")
    assert report.ok is True
    assert report.retried is False
    assert report.outcome.kind is OutcomeKind.SUCCESS
    assert report.to_dict()["attempts"] == ["https://example.com"]
    assert client.closed is True


def test_text_output_message_format():
    stdout = io.StringIO()
    out = TextOutput(OutputSettings(color=False), stdout=stdout, stderr=io.StringIO())
    out.message("protocol", out.dark_red("No HTTPS support"), "tls: oversized record received with length 20527")
    out.message("status", "200 OK")
    assert stdout.getvalue().splitlines() == [
        "[protocol] No HTTPS support (tls: oversized record received with length 20527)",
        "[status] 200 OK",
    ]


def test_ipv6_target_with_default_port_is_dialed_bracketed(monkeypatch, capsys):
    client = _install_client(monkeypatch, StubHttpClient({"https://[fe80::1]:443": H2_OK}))

    assert cli_main.main(["https://fe80::1:443"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "GET https://[fe80::1]:443"
    assert [r.url for r in client.requests] == ["https://[fe80::1]:443"]


def test_main_loads_probe_settings_once(monkeypatch, capsys):
    calls = []

    def load():
        calls.append(1)
        return ProbeSettings()

    def unexpected_load():
        raise AssertionError("settings loaded twice")

    monkeypatch.setattr(cli_main, "load_probe_settings", load)
    monkeypatch.setattr(runtime_module, "load_probe_settings", unexpected_load)
    _install_client(monkeypatch, StubHttpClient({"https://example.com": H2_OK}))

    assert cli_main.main(["example.com"]) == 0
    assert calls == [1]


def test_runtime_builds_client_from_given_settings(monkeypatch):
    built = []
    settings = ProbeSettings(timeout=2.5)

    def factory(given):
        built.append(given)
        return StubHttpClient({})

    monkeypatch.setattr(runtime_module, "create_default_http_client", factory)
    monkeypatch.setattr(runtime_module, "load_probe_settings", lambda: pytest.fail("settings reloaded"))

    Http2Check(settings=settings, interfaces=[]).close()
    assert built == [settings]
