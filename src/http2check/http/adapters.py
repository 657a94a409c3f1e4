# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpClient implementations."""

from __future__ import annotations

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests and dry runs.

    A configured exception is raised instead of returned, which is how a
    RequestConstructionError surfaces from the real client.
    """

    def __init__(self, responses: dict[str, HttpResponse | Exception] | None = None):
        self._responses = responses or {}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | Exception) -> None:
        self._responses[url] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        configured = self._responses.get(request.url)
        if isinstance(configured, Exception):
            raise configured
        if configured is not None:
            return configured
        return HttpResponse(ok=False, url=request.url, error_message="No stubbed response configured")

    def close(self) -> None:
        self.closed = True
