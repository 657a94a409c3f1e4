# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Outcome taxonomy reported at the end of a probe."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .probe import ProbeResult


class OutcomeKind(str, Enum):
    SUCCESS = "SUCCESS"
    PROTOCOL_MISMATCH = "PROTOCOL_MISMATCH"
    NO_HTTP2_SUPPORT = "NO_HTTP2_SUPPORT"
    HOST_DOWN = "HOST_DOWN"
    HOST_UNRESOLVABLE = "HOST_UNRESOLVABLE"
    NO_HTTPS_SUPPORT = "NO_HTTPS_SUPPORT"
    UNCLASSIFIED = "UNCLASSIFIED"

    def __str__(self) -> str:
        return self.value


# kind -> (category, label, fixed extra)
_PRESENTATION: dict[OutcomeKind, tuple[str, str, str | None]] = {
    OutcomeKind.PROTOCOL_MISMATCH: ("protocol", "Not HTTP/2", None),
    OutcomeKind.NO_HTTP2_SUPPORT: ("HTTP/2", "Not supported", None),
    OutcomeKind.HOST_DOWN: ("host", "Down", None),
    OutcomeKind.HOST_UNRESOLVABLE: ("host", "Down", "host not found"),
    OutcomeKind.NO_HTTPS_SUPPORT: ("protocol", "No HTTPS support", None),
}

_DETAIL_KINDS = {OutcomeKind.HOST_DOWN, OutcomeKind.NO_HTTPS_SUPPORT, OutcomeKind.UNCLASSIFIED}


@dataclass(frozen=True)
class Outcome:
    """Terminal, externally observable result of one probe invocation."""

    kind: OutcomeKind
    result: ProbeResult | None = None
    detail: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is OutcomeKind.SUCCESS) != (self.result is not None):
            raise ValueError("only a SUCCESS outcome carries a ProbeResult")
        if self.kind in _DETAIL_KINDS and self.detail is None:
            raise ValueError(f"{self.kind} outcome requires a detail")

    @classmethod
    def success(cls, result: ProbeResult) -> Outcome:
        return cls(OutcomeKind.SUCCESS, result=result)

    @classmethod
    def protocol_mismatch(cls) -> Outcome:
        return cls(OutcomeKind.PROTOCOL_MISMATCH)

    @classmethod
    def no_http2_support(cls) -> Outcome:
        return cls(OutcomeKind.NO_HTTP2_SUPPORT)

    @classmethod
    def host_down(cls, detail: str) -> Outcome:
        return cls(OutcomeKind.HOST_DOWN, detail=detail)

    @classmethod
    def host_unresolvable(cls) -> Outcome:
        return cls(OutcomeKind.HOST_UNRESOLVABLE)

    @classmethod
    def no_https_support(cls, detail: str) -> Outcome:
        return cls(OutcomeKind.NO_HTTPS_SUPPORT, detail=detail)

    @classmethod
    def unclassified(cls, detail: str) -> Outcome:
        return cls(OutcomeKind.UNCLASSIFIED, detail=detail)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def category(self) -> str | None:
        """Bracketed subject of the failure line (``protocol``, ``HTTP/2`` or ``host``)."""
        entry = _PRESENTATION.get(self.kind)
        return entry[0] if entry else None

    @property
    def label(self) -> str | None:
        entry = _PRESENTATION.get(self.kind)
        return entry[1] if entry else None

    @property
    def extra(self) -> str | None:
        """Text shown in parentheses after the label, if any."""
        entry = _PRESENTATION.get(self.kind)
        if entry is None:
            return None
        if entry[2] is not None:
            return entry[2]
        return self.detail

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"kind": self.kind.value}
        if self.result is not None:
            payload["protocol"] = self.result.protocol
            payload["status"] = self.result.status_line
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload
