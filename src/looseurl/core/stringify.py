"""src/looseurl/core/stringify.py

Canonical string form of a URL.
"""

from typing import Any, Dict, Optional, Protocol

from looseurl.core.parser import PORT_SEPARATOR, QUERY_SEPARATOR, SEPARATOR
from looseurl.utils.codec import encode_nested_query, escape_path

__all__ = ["URLView", "to_string"]


class URLView(Protocol):
    """Read-only view of the components the stringifier needs."""

    @property
    def protocol(self) -> str: ...

    @property
    def host(self) -> str: ...

    @property
    def port(self) -> Optional[int]: ...

    @property
    def path(self) -> Optional[str]: ...

    @property
    def query(self) -> Dict[str, Any]: ...


def to_string(url: URLView) -> str:
    """
    Build the canonical string of ``url``.

    Protocol and host are always emitted; port, path and query only when
    present and non-empty.
    """
    parts = [url.protocol, SEPARATOR, url.host]

    if url.port is not None:
        parts.append(f"{PORT_SEPARATOR}{url.port}")
    if url.path:
        parts.append(escape_path(url.path))
    if url.query:
        parts.append(f"{QUERY_SEPARATOR}{encode_nested_query(url.query)}")

    return "".join(parts)
