# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for http2check."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"http2check/{__version__}"
DEFAULT_TARGET = "https://http2.golang.org"
VERSION_STRING = f"http2check {__version__}"


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


def _present_env(name: str) -> bool:
    return bool(os.getenv(name))


@dataclass
class ProbeSettings:
    """Transport defaults for the HTTP/2 probe.

    A timeout of ``None`` leaves the round trip unbounded; a hung peer blocks
    until the process is killed.
    """

    timeout: float | None = None
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            timeout=_optional_float_env("HTTP2CHECK_TIMEOUT", cls.timeout),
            user_agent=os.getenv("HTTP2CHECK_USER_AGENT", cls.user_agent),
        )


@dataclass
class OutputSettings:
    """Terminal output switches, read once at process start."""

    color: bool = True
    quiet: bool = False

    @classmethod
    def from_env(cls, *, quiet: bool = False) -> "OutputSettings":
        return cls(color=not _present_env("NO_COLOR"), quiet=quiet)


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()


def load_output_settings(*, quiet: bool = False) -> OutputSettings:
    return OutputSettings.from_env(quiet=quiet)
