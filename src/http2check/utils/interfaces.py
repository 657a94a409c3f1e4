# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Local network interface enumeration."""

from __future__ import annotations

import psutil

from ..errors import InterfaceEnumerationError


def list_interface_names() -> list[str]:
    """Return the names of the local network interfaces."""
    try:
        addresses = psutil.net_if_addrs()
    except (psutil.Error, OSError) as exc:
        raise InterfaceEnumerationError(f"could not list network interfaces: {exc}") from exc
    return list(addresses)


__all__ = ["list_interface_names"]
