# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Target normalization: scheme defaulting, IPv6 bracket notation and zone stripping.

Everything here is string work; no network I/O happens while normalizing.
"""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Iterable

from ..models.target import Target
from ..utils.interfaces import list_interface_names

logger = logging.getLogger(__name__)

HTTPS_PREFIX = "https://"
SCHEME_SEPARATOR = "://"

_DEFAULT_PORTS = {"http": ":80", "https": ":443"}
_ZONE_DELIMITERS = "]:/?#"


def ensure_scheme(url: str) -> str:
    """Prefix ``https://`` when the URL carries no scheme at all."""
    if SCHEME_SEPARATOR in url:
        return url
    return HTTPS_PREFIX + url


def fix_ipv6(url: str) -> str:
    """
    Rewrite an IPv6 host into bracket notation with its implied default port.

    Example:
      https://::1 -> [::1]:443
      http://fe80::1 -> [fe80::1]:80
      HTTPS://fe80::1:443 -> [fe80::1]:443

    http and https lose their scheme (matched case-insensitively); callers
    re-apply ``ensure_scheme`` afterwards. A trailing default port is kept
    outside the brackets. Any other scheme is kept and only the host is
    bracketed.
    """
    scheme, separator, rest = url.partition(SCHEME_SEPARATOR)
    if not separator:
        return "[" + url + "]"
    default_port = _DEFAULT_PORTS.get(scheme.lower())
    if default_port is None:
        return scheme + SCHEME_SEPARATOR + "[" + rest + "]"
    host = rest
    if rest.endswith(default_port):
        trimmed = rest[: -len(default_port)]
        if trimmed and not trimmed.endswith(":"):
            host = trimmed
    return "[" + host + "]" + default_port


def split_authority(url: str) -> tuple[str, str]:
    """Split ``url`` into ``scheme://authority`` and the path/query/fragment tail."""
    scheme_end = url.find(SCHEME_SEPARATOR)
    start = scheme_end + len(SCHEME_SEPARATOR) if scheme_end >= 0 else 0
    for index in range(start, len(url)):
        if url[index] in "/?#":
            return url[:index], url[index:]
    return url, ""


def authority_of(url: str) -> str:
    head, _ = split_authority(url)
    scheme_end = head.find(SCHEME_SEPARATOR)
    return head[scheme_end + len(SCHEME_SEPARATOR) :] if scheme_end >= 0 else head


def is_bracketed(url: str) -> bool:
    return authority_of(url).startswith("[")


def looks_like_ipv6(url: str) -> bool:
    """
    Best-effort IPv6 literal detection.

    A string that parses as an IPv6 address counts (IPv4-mapped addresses are
    treated as IPv4). Otherwise any unbracketed authority containing ``::`` is
    assumed to be IPv6; this is a heuristic and fully expanded addresses behind
    a scheme slip through to the retry path.
    """
    try:
        address = ipaddress.ip_address(url)
    except ValueError:
        address = None
    if address is not None:
        return isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is None
    return "::" in authority_of(url) and not is_bracketed(url)


def strip_zone(url: str, interface_names: Iterable[str]) -> tuple[str, str | None]:
    """
    Remove the first ``%<iface>`` zone naming a local interface.

    The zone must end at a delimiter so ``%lo`` never eats into ``%lo0``.
    """
    for name in interface_names:
        if not name:
            continue
        token = "%" + name
        index = url.find(token)
        while index >= 0:
            end = index + len(token)
            if end == len(url) or url[end] in _ZONE_DELIMITERS:
                return url[:index] + url[end:], name
            index = url.find(token, index + 1)
    return url, None


def _bracket_host(url: str) -> str:
    head, tail = split_authority(url)
    return ensure_scheme(fix_ipv6(head) + tail)


def normalize_target(raw: str, interfaces: Iterable[str] | None = None) -> Target:
    """Build a request-ready Target from user input."""
    url = raw.strip()
    fixed = looks_like_ipv6(url)
    if fixed:
        url = _bracket_host(url)
        logger.debug("treating %r as an IPv6 literal: %s", raw, url)
    url = ensure_scheme(url)

    names = list_interface_names() if interfaces is None else interfaces
    url, zone = strip_zone(url, names)
    if zone is not None:
        logger.debug("stripped interface zone %%%s from %r", zone, raw)

    return Target(raw=raw, normalized=url, is_ipv6=fixed or is_bracketed(url), stripped_zone=zone)


def refix_ipv6(target: Target) -> Target:
    """Re-derive ``target.normalized`` as an IPv6 literal (retry path, mutates in place)."""
    if not is_bracketed(target.normalized):
        target.normalized = _bracket_host(target.normalized)
    target.is_ipv6 = True
    logger.debug("re-derived IPv6 target: %s", target.normalized)
    return target


__all__ = [
    "authority_of",
    "ensure_scheme",
    "fix_ipv6",
    "is_bracketed",
    "looks_like_ipv6",
    "normalize_target",
    "refix_ipv6",
    "split_authority",
    "strip_zone",
]
