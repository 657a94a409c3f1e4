# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""TLS context for HTTP/2-only probing."""

from __future__ import annotations

import ssl

from ..errors import UnexpectedALPNProtocol

H2_ALPN = "h2"


def ensure_h2_negotiated(negotiated: str | None) -> None:
    if negotiated != H2_ALPN:
        raise UnexpectedALPNProtocol(negotiated)


class Http2OnlySSLSocket(ssl.SSLSocket):
    """SSLSocket that refuses to finish a handshake without ``h2`` selected."""

    def do_handshake(self, block: bool = False) -> None:
        super().do_handshake(block)
        ensure_h2_negotiated(self.selected_alpn_protocol())


class Http2OnlySSLContext(ssl.SSLContext):
    """
    Client context that offers only ``h2`` over ALPN.

    The transport stack may try to advertise ``http/1.1`` as well; that request
    is narrowed to ``h2`` so a server cannot talk us down to HTTP/1.x.
    """

    sslsocket_class = Http2OnlySSLSocket

    def set_alpn_protocols(self, alpn_protocols) -> None:  # noqa: ANN001
        super().set_alpn_protocols([H2_ALPN])


def create_probe_ssl_context() -> Http2OnlySSLContext:
    """Certificate checks are off: the probe detects protocols, it does not validate trust."""
    context = Http2OnlySSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    context.set_alpn_protocols([H2_ALPN])
    return context


__all__ = [
    "H2_ALPN",
    "Http2OnlySSLContext",
    "Http2OnlySSLSocket",
    "create_probe_ssl_context",
    "ensure_h2_negotiated",
]
