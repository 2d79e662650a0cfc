"""src/looseurl/core/host.py

Domain decomposition of dot-separated host names.

For ``www.example.com``::

    subdomain = "www"
    sld       = "example"
    tld       = "com"
    domain    = "example.com"

A single-label host such as ``localhost`` has no TLD; its only label is
reported as the SLD.
"""

from typing import List, NamedTuple, Optional

__all__ = [
    "HostParts",
    "labels",
    "tld",
    "sld",
    "domain",
    "subdomain",
    "split_host",
    "join_host",
]

DOT = "."


class HostParts(NamedTuple):
    """Decomposed host, most specific part first."""

    subdomain: Optional[str]
    sld: Optional[str]
    tld: Optional[str]


def labels(host: str) -> List[str]:
    """Split a host into its labels. Empty labels are kept."""
    return host.split(DOT)


def tld(host: str) -> Optional[str]:
    """Last label, or None for single-label hosts."""
    parts = labels(host)
    if len(parts) < 2:
        return None
    return parts[-1]


def sld(host: str) -> str:
    """Label before the TLD, or the sole label of a single-label host."""
    parts = labels(host)
    if len(parts) < 2:
        return parts[-1]
    return parts[-2]


def subdomain(host: str) -> Optional[str]:
    """Labels in front of the SLD joined by dots, or None if there are none."""
    rest = labels(host)[:-2]
    if not rest:
        return None
    return DOT.join(rest)


def domain(host: str) -> str:
    """SLD and TLD joined by a dot."""
    return join_host(HostParts(None, sld(host), tld(host)))


def split_host(host: str) -> HostParts:
    """Decompose ``host`` into subdomain, SLD and TLD."""
    return HostParts(subdomain(host), sld(host), tld(host))


def join_host(parts: HostParts, compact: bool = True) -> str:
    """
    Recompose a host from its parts.

    Args:
        parts: Subdomain, SLD and TLD.
        compact: Drop missing parts. When False every part must be present.

    Returns:
        The dot-joined host.

    Raises:
        ValueError: If ``compact`` is False and a part is missing.
    """
    if compact:
        return DOT.join(part for part in parts if part is not None)

    missing = [name for name, part in zip(parts._fields, parts) if part is None]
    if missing:
        raise ValueError(f"Missing host parts: {', '.join(missing)}")
    return DOT.join(parts)
