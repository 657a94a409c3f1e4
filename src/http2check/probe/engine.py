# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-target HTTP/2 probe with the one-shot IPv6 retry."""

from __future__ import annotations

import logging
from typing import Protocol

from ..errors import is_ipv6_ambiguity
from ..http.client import HttpClient, create_default_http_client
from ..http.models import HttpRequest
from ..http.url import refix_ipv6
from ..models.probe import ProbeAttempt, ProbeResult, TransportFailure
from ..models.target import Target

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 2


class ProbeObserver(Protocol):
    """Receives human-readable progress; not part of the result."""

    def zone_stripped(self, zone: str) -> None: ...

    def request_started(self, url: str) -> None: ...

    def retrying_as_ipv6(self, url: str) -> None: ...


class LoggingObserver:
    def zone_stripped(self, zone: str) -> None:
        logger.info('ignoring "%%%s"', zone)

    def request_started(self, url: str) -> None:
        logger.info("GET %s", url)

    def retrying_as_ipv6(self, url: str) -> None:
        logger.info("retrying as IPv6: %s", url)


class ProtocolProbe:
    """
    Issues the HTTP/2 round trip for a Target.

    The first attempt may be followed by exactly one more, and only when it
    failed because an IPv6 literal was split on the wrong colon. The target is
    re-derived in place before the second attempt.
    """

    def __init__(self, http_client: HttpClient | None = None, observer: ProbeObserver | None = None):
        self.http_client = http_client or create_default_http_client()
        self.observer = observer or LoggingObserver()

    def _attempt(self, target: Target) -> ProbeAttempt:
        url = target.normalized
        response = self.http_client.request(HttpRequest(url=url))
        if response.ok:
            result = ProbeResult(protocol=response.protocol, status_line=response.status_line)
            logger.debug("%s answered %s %s", url, result.protocol, result.status_line)
            return ProbeAttempt(target=target, url=url, result=result)
        failure = TransportFailure(
            message=response.error_message or response.error_type or "unknown transport error",
            error_type=response.error_type,
        )
        logger.debug("%s failed: %s", url, failure.message)
        return ProbeAttempt(target=target, url=url, failure=failure)

    def run(self, target: Target) -> list[ProbeAttempt]:
        """Probe ``target`` and return every attempt made (one or two)."""
        attempts: list[ProbeAttempt] = []
        self.observer.request_started(target.normalized)
        for attempt_number in range(1, MAX_ATTEMPTS + 1):
            attempt = self._attempt(target)
            attempts.append(attempt)
            retryable = attempt.failure is not None and is_ipv6_ambiguity(attempt.failure.message)
            if not retryable or attempt_number == MAX_ATTEMPTS:
                break
            refix_ipv6(target)
            self.observer.retrying_as_ipv6(target.normalized)
        return attempts

    def probe(self, target: Target) -> ProbeAttempt:
        """Probe ``target`` and return the attempt that decides the outcome."""
        return self.run(target)[-1]
