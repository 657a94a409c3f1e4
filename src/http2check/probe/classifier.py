# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Outcome classification.

Transport errors arrive as free text whose wording belongs to the transport
stack. Every piece of that wording lives in ``_RULES``; the first matching rule
wins and anything unmatched is surfaced verbatim as UNCLASSIFIED.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..models.outcome import Outcome, OutcomeKind
from ..models.probe import ProbeResult


@dataclass(frozen=True)
class _Rule:
    matches: Callable[[str], bool]
    kind: OutcomeKind
    keeps_detail: bool = False


def _equals(expected: str) -> Callable[[str], bool]:
    return lambda text: text == expected


def _starts_with(prefix: str) -> Callable[[str], bool]:
    return lambda text: text.startswith(prefix)


def _contains_any(*needles: str) -> Callable[[str], bool]:
    return lambda text: any(needle in text for needle in needles)


_RULES: tuple[_Rule, ...] = (
    _Rule(_equals("bad protocol:"), OutcomeKind.PROTOCOL_MISMATCH),
    _Rule(_equals("http2: unsupported scheme and no Fallback"), OutcomeKind.NO_HTTP2_SUPPORT),
    _Rule(_starts_with("http2: unexpected ALPN protocol"), OutcomeKind.PROTOCOL_MISMATCH),
    _Rule(
        lambda text: text.startswith("dial tcp") and text.endswith(": connection refused"),
        OutcomeKind.HOST_DOWN,
        keeps_detail=True,
    ),
    _Rule(_starts_with("dial tcp: lookup"), OutcomeKind.HOST_UNRESOLVABLE),
    _Rule(
        _starts_with("tls: oversized record received with length "),
        OutcomeKind.NO_HTTPS_SUPPORT,
        keeps_detail=True,
    ),
    # OpenSSL wording for the same conditions.
    _Rule(_contains_any("NO_APPLICATION_PROTOCOL", "no application protocol"), OutcomeKind.PROTOCOL_MISMATCH),
    _Rule(
        _contains_any("WRONG_VERSION_NUMBER", "record layer failure", "packet length too long"),
        OutcomeKind.NO_HTTPS_SUPPORT,
        keeps_detail=True,
    ),
)


def classify_error(error: str) -> Outcome:
    """Map normalized transport error text to a failure Outcome."""
    text = error.strip()
    for rule in _RULES:
        if rule.matches(text):
            return Outcome(rule.kind, detail=text if rule.keeps_detail else None)
    return Outcome.unclassified(error)


def classify(error: str | None, result: ProbeResult | None = None) -> Outcome:
    """Classify a finished probe: a result without an error is a success."""
    if error is None:
        if result is None:
            raise ValueError("classify() needs an error or a result")
        return Outcome.success(result)
    return classify_error(error)


__all__ = ["classify", "classify_error"]
