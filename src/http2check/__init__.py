# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
http2check package entrypoint.

Probes a web server over an HTTP/2-only transport and classifies the result.
HTTP behavior is abstracted behind an injectable client interface, and domain
objects are modeled with typed dataclasses.
"""

from .config import OutputSettings, ProbeSettings, load_output_settings, load_probe_settings
from .errors import Http2CheckError, InterfaceEnumerationError, RequestConstructionError
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, create_default_http_client, normalize_target
from .log import setup_logging
from .models import Outcome, OutcomeKind, ProbeAttempt, ProbeReport, ProbeResult, Target
from .probe import ProtocolProbe, classify
from .runtime import Http2Check
from .version import __version__

__all__ = [
    "Http2Check",
    "Http2CheckError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "InterfaceEnumerationError",
    "Outcome",
    "OutcomeKind",
    "OutputSettings",
    "ProbeAttempt",
    "ProbeReport",
    "ProbeResult",
    "ProbeSettings",
    "ProtocolProbe",
    "RequestConstructionError",
    "Target",
    "classify",
    "create_default_http_client",
    "load_output_settings",
    "load_probe_settings",
    "normalize_target",
    "setup_logging",
    "__version__",
]
