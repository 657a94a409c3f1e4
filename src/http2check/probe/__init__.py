# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe engine and outcome classification."""

from .classifier import classify, classify_error
from .engine import MAX_ATTEMPTS, LoggingObserver, ProbeObserver, ProtocolProbe

__all__ = [
    "MAX_ATTEMPTS",
    "LoggingObserver",
    "ProbeObserver",
    "ProtocolProbe",
    "classify",
    "classify_error",
]
