# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation, pinned to HTTP/2."""

from __future__ import annotations

from typing import Any

import httpx

from ..config import ProbeSettings, load_probe_settings
from ..errors import (
    UNSUPPORTED_SCHEME_MESSAGE,
    AddressError,
    RequestConstructionError,
    describe_transport_error,
)
from .client import HttpClient
from .models import HttpRequest, HttpResponse
from .tls import create_probe_ssl_context
from .url import SCHEME_SEPARATOR, authority_of

HTTPS_PORT = 443


def dial_address(url: str) -> tuple[str, int]:
    """
    Split the authority of ``url`` into the host and port that would be dialed.

    An unbracketed host with more than one colon is ambiguous (an IPv6 literal
    cannot be told apart from a port) and raises AddressError, which the probe
    may retry. An unterminated bracket raises RequestConstructionError.
    """
    hostport = authority_of(url).rsplit("@", 1)[-1]
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            raise RequestConstructionError(f"invalid request target {url!r}: missing ']' in address")
        host = hostport[1:end]
        port_text = hostport[end + 2 :] if hostport[end + 1 : end + 2] == ":" else ""
    else:
        if hostport.count(":") > 1:
            raise AddressError(hostport, "too many colons in address")
        host, _, port_text = hostport.partition(":")
    port = int(port_text) if port_text.isdigit() else HTTPS_PORT
    return host, port


class HttpxClient(HttpClient):
    """
    Synchronous httpx client that speaks HTTP/2 and nothing else.

    HTTP/1.1 is disabled on the transport, only ``h2`` is offered over ALPN and
    certificate verification is off. Transport failures come back as
    ``HttpResponse(ok=False)``; only a malformed request raises.
    """

    def __init__(self, settings: ProbeSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_probe_settings()
        self._client = client or httpx.Client(
            http1=False,
            http2=True,
            verify=create_probe_ssl_context(),
            timeout=self.settings.timeout,
            follow_redirects=False,
            trust_env=False,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        scheme = request.url.split(SCHEME_SEPARATOR, 1)[0].lower() if SCHEME_SEPARATOR in request.url else ""
        if scheme != "https":
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=UNSUPPORTED_SCHEME_MESSAGE,
                error_type="UnsupportedScheme",
            )

        try:
            host, port = dial_address(request.url)
        except AddressError as exc:
            return HttpResponse(ok=False, url=request.url, error_message=str(exc), error_type=type(exc).__name__)

        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        build_kwargs: dict[str, Any] = {"headers": headers}
        if request.timeout is not None:
            build_kwargs["timeout"] = request.timeout

        try:
            http_request = self._client.build_request(request.method, request.url, **build_kwargs)
        except httpx.InvalidURL as exc:
            raise RequestConstructionError(f"invalid request target {request.url!r}: {exc}") from exc

        try:
            resp = self._client.send(http_request, stream=True)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=describe_transport_error(exc, host=host, port=port),
                error_type=type(exc).__name__,
            )

        try:
            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                reason_phrase=resp.reason_phrase,
                http_version=resp.http_version,
                headers=dict(resp.headers),
                url=str(resp.url),
            )
        finally:
            resp.close()

    def close(self) -> None:
        self._client.close()
