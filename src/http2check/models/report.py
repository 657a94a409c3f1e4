# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe report model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .outcome import Outcome
from .probe import ProbeAttempt
from .target import Target


@dataclass
class ProbeReport:
    target: Target
    outcome: Outcome
    attempts: list[ProbeAttempt] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome.ok

    @property
    def retried(self) -> bool:
        return len(self.attempts) > 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": {
                "raw": self.target.raw,
                "normalized": self.target.normalized,
                "is_ipv6": self.target.is_ipv6,
                "stripped_zone": self.target.stripped_zone,
            },
            "attempts": [attempt.url for attempt in self.attempts],
            "outcome": self.outcome.to_dict(),
        }
