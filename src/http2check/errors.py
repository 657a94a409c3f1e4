# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and transport error helpers."""

from __future__ import annotations

import socket
import ssl

UNSUPPORTED_SCHEME_MESSAGE = "http2: unsupported scheme and no Fallback"
TOO_MANY_COLONS = "too many colons"


class Http2CheckError(Exception):
    """Base class for fatal http2check errors."""


class RequestConstructionError(Http2CheckError):
    """The target could not be turned into a request."""


class InterfaceEnumerationError(Http2CheckError):
    """Local network interfaces could not be listed."""


class AddressError(Http2CheckError):
    """The dial authority cannot be split into host and port."""

    def __init__(self, authority: str, reason: str):
        super().__init__(f"address {authority}: {reason}")
        self.authority = authority
        self.reason = reason


class UnexpectedALPNProtocol(ssl.SSLError):
    """The TLS handshake completed without selecting ``h2``."""

    def __init__(self, negotiated: str | None):
        self.negotiated = negotiated or ""
        super().__init__(f'http2: unexpected ALPN protocol "{self.negotiated}"; want "h2"')

    def __str__(self) -> str:
        return str(self.args[0])


def _cause_chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def format_address(host: str, port: int) -> str:
    if ":" in host and not host.startswith("["):
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def describe_transport_error(exc: BaseException, *, host: str = "", port: int = 443) -> str:
    """
    Render an exception raised by the transport stack as normalized error text.

    Connection refusals and name resolution failures are spelled the way the
    outcome classifier expects; everything else keeps its own message.
    """
    chain = _cause_chain(exc)

    for item in chain:
        if isinstance(item, (UnexpectedALPNProtocol, AddressError)):
            return str(item)

    for item in chain:
        if isinstance(item, ConnectionRefusedError):
            return f"dial tcp {format_address(host, port)}: connection refused"
        if isinstance(item, socket.gaierror):
            reason = item.strerror or "no such host"
            return f"dial tcp: lookup {host}: {reason}"

    message = str(exc).strip()
    if not message:
        return type(exc).__name__
    if "Connection refused" in message:
        return f"dial tcp {format_address(host, port)}: connection refused"
    return message


def is_ipv6_ambiguity(message: str | None) -> bool:
    """True when a failure stems from an IPv6 literal split on the wrong colon."""
    return TOO_MANY_COLONS in (message or "")


__all__ = [
    "AddressError",
    "Http2CheckError",
    "InterfaceEnumerationError",
    "RequestConstructionError",
    "TOO_MANY_COLONS",
    "UNSUPPORTED_SCHEME_MESSAGE",
    "UnexpectedALPNProtocol",
    "describe_transport_error",
    "format_address",
    "is_ipv6_ambiguity",
]
