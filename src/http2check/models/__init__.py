# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for http2check."""

from .outcome import Outcome, OutcomeKind
from .probe import ProbeAttempt, ProbeResult, TransportFailure
from .report import ProbeReport
from .target import Target

__all__ = [
    "Outcome",
    "OutcomeKind",
    "ProbeAttempt",
    "ProbeReport",
    "ProbeResult",
    "Target",
    "TransportFailure",
]
