"""src/looseurl/core/parser.py

Lenient URL parser.

Splits a raw string into protocol, host, port, path and query text without
validating any of them. Only the first ``://`` and the first ``/`` after it
delimit components, so URLs nested inside a path stay intact::

    https://img.example.com/200x200/https://cdn.example.com/a.jpg
    -----   ---------------  ----------------------------------
    protocol     host                      path
"""

from dataclasses import astuple, dataclass
from typing import Optional

__all__ = ["Components", "parse_components"]

SEPARATOR = "://"
SLASH = "/"
QUERY_SEPARATOR = "?"
PORT_SEPARATOR = ":"


@dataclass
class Components:
    """
    Raw text of each URL component.

    Attributes:
        protocol: Text before the first ``://``.
        host: Host name, without port.
        port: Port text, not yet converted to a number.
        path: Path starting with ``/``.
        query: Query text without the leading ``?``.
    """

    protocol: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None

    def is_empty(self) -> bool:
        """True when no component was found."""
        return all(field is None for field in astuple(self))


def _split_protocol(raw: str):
    protocol, sep, rest = raw.partition(SEPARATOR)
    if not sep:
        return None, raw
    return protocol, rest


def _split_host_and_port(rest: str):
    segment = rest.split(SLASH, 1)[0].split(QUERY_SEPARATOR, 1)[0]
    host, *ports = segment.split(PORT_SEPARATOR)
    port = ports[0] if ports else None
    return host or None, port or None


def _split_path_and_query(rest: str):
    start = rest.find(SLASH)
    if start == -1:
        _, _, query = rest.partition(QUERY_SEPARATOR)
        return None, query or None

    path, _, query = rest[start:].partition(QUERY_SEPARATOR)
    return path, query or None


def parse_components(raw: str) -> Components:
    """
    Split ``raw`` into its URL components.

    Args:
        raw: URL text, with or without a protocol.

    Returns:
        Components with every field None when ``raw`` holds nothing after
        the protocol separator.
    """
    protocol, rest = _split_protocol(raw)
    if not rest:
        return Components()

    host, port = _split_host_and_port(rest)
    path, query = _split_path_and_query(rest)

    return Components(
        protocol=protocol, host=host, port=port, path=path, query=query
    )
