# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient, dial_address
from .models import Headers, HttpRequest, HttpResponse
from .tls import create_probe_ssl_context
from .url import fix_ipv6, normalize_target, refix_ipv6

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "create_default_http_client",
    "create_probe_ssl_context",
    "dial_address",
    "fix_ipv6",
    "normalize_target",
    "refix_ipv6",
]
