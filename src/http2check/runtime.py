# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level http2check facade: normalize, probe, classify."""

from __future__ import annotations

from collections.abc import Iterable
from contextlib import suppress

from .config import ProbeSettings, load_probe_settings
from .http.client import HttpClient, create_default_http_client
from .http.url import normalize_target
from .models import ProbeReport
from .probe.classifier import classify
from .probe.engine import LoggingObserver, ProbeObserver, ProtocolProbe


class Http2Check:
    """
    Convenience wrapper that owns the HTTP client for one or more checks.

    ``settings`` is only read when no client is supplied. ``interfaces`` overrides
    local interface enumeration (used for zone stripping); by default the host's
    interfaces are listed on every check.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        settings: ProbeSettings | None = None,
        observer: ProbeObserver | None = None,
        interfaces: Iterable[str] | None = None,
    ):
        if http_client is None:
            http_client = create_default_http_client(settings or load_probe_settings())
        self.http_client = http_client
        self.observer = observer or LoggingObserver()
        self.interfaces = list(interfaces) if interfaces is not None else None
        self.probe = ProtocolProbe(self.http_client, observer=self.observer)

    def check(self, raw: str) -> ProbeReport:
        """Run the whole pipeline for one user supplied host/URL."""
        target = normalize_target(raw, self.interfaces)
        if target.stripped_zone is not None:
            self.observer.zone_stripped(target.stripped_zone)

        attempts = self.probe.run(target)
        final = attempts[-1]
        error = final.failure.message if final.failure is not None else None
        outcome = classify(error, final.result)
        return ProbeReport(target=target, outcome=outcome, attempts=attempts)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> Http2Check:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
