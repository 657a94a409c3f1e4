# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the probe."""

from __future__ import annotations

from dataclasses import dataclass, field

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """
    Response metadata from a single round trip.

    The body is never read. On transport failure ``ok`` is False and
    ``error_message`` holds the normalized error text.
    """

    ok: bool
    status_code: int | None = None
    reason_phrase: str = ""
    http_version: str | None = None
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None

    @property
    def protocol(self) -> str:
        """Protocol string in ``HTTP/<major>.<minor>`` form (``HTTP/2`` -> ``HTTP/2.0``)."""
        version = self.http_version or ""
        if version.startswith("HTTP/") and "." not in version:
            return f"{version}.0"
        return version

    @property
    def status_line(self) -> str:
        if self.status_code is None:
            return ""
        return f"{self.status_code} {self.reason_phrase}".rstrip()
