# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request target model."""

from dataclasses import dataclass


@dataclass
class Target:
    """
    A user supplied host/URL and the request URL derived from it.

    ``normalized`` always carries a ``scheme://`` prefix once the normalizer
    has run. The retry path is the only place that mutates an existing target.
    """

    raw: str
    normalized: str
    is_ipv6: bool = False
    stripped_zone: str | None = None
