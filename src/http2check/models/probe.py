# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe attempt/result models."""

from dataclasses import dataclass

from .target import Target


@dataclass(frozen=True)
class ProbeResult:
    protocol: str
    status_line: str


@dataclass(frozen=True)
class TransportFailure:
    message: str
    error_type: str | None = None


@dataclass
class ProbeAttempt:
    """One round trip against ``url``; exactly one of ``result``/``failure`` is set."""

    target: Target
    url: str
    result: ProbeResult | None = None
    failure: TransportFailure | None = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.failure is None):
            raise ValueError("ProbeAttempt needs exactly one of result or failure")

    @property
    def ok(self) -> bool:
        return self.result is not None
