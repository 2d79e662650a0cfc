"""src/looseurl/url.py

URL value type for looseurl.
"""

import copy
import logging
from typing import Any, Dict, Mapping, Optional, Union

from looseurl.core import host as hostname
from looseurl.core.host import HostParts
from looseurl.core.parser import Components, parse_components
from looseurl.core.stringify import to_string
from looseurl.exceptions import InvalidDomainOperation
from looseurl.utils.codec import decode_nested_query, stringify_keys

__all__ = ["URL", "DEFAULT_PROTOCOL"]

logger = logging.getLogger(__name__)

DEFAULT_PROTOCOL = "https"
SLASH = "/"


def _coerce_port(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    if not text.isdecimal():
        logger.debug("Ignoring non-numeric port %r", text)
        return None
    try:
        return int(text)
    except ValueError:
        # Digit count above sys.get_int_max_str_digits()
        logger.debug("Ignoring unconvertible port of %d digits", len(text))
        return None


def _strip_slashes(segment: str, keep_trailing: bool = False) -> str:
    if segment.startswith(SLASH):
        segment = segment[1:]
    if not keep_trailing and segment.endswith(SLASH):
        segment = segment[:-1]
    return segment


class URL:
    """
    Mutable URL made of protocol, host, port, path and query.

    Instances come from :meth:`URL.parse`; the constructor is not public.
    Domain components (``subdomain``, ``sld``, ``tld``, ``domain``) are
    derived from ``host`` on every access.

    Example::

        >>> url = URL.parse("example.com")
        >>> url.join("api", "v1").merge({"page": 2})
        <URL https://example.com/api/v1?page=2>
    """

    __slots__ = ("_protocol", "_host", "_port", "_path", "_query")

    def __init__(self, *args: Any, **kwargs: Any):
        raise TypeError(f"{type(self).__name__} instances are created with parse()")

    @classmethod
    def parse(cls, raw: Any) -> Optional["URL"]:
        """
        Parse ``raw`` into a URL.

        Args:
            raw: URL text. Bytes are decoded as UTF-8 (undecodable bytes
                replaced); other non-string values are converted with
                ``str()``.

        Returns:
            The parsed URL, or None when ``raw`` is None, empty or holds
            nothing but a protocol.
        """
        if raw is None:
            return None

        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8", errors="replace")

        components = parse_components(str(raw))
        if components.is_empty():
            logger.debug("Nothing to parse in %r", raw)
            return None
        return cls._from_components(components)

    from_string = parse

    @classmethod
    def _from_components(cls, components: Components) -> "URL":
        url = cls.__new__(cls)
        url._protocol = components.protocol
        url._host = components.host or ""
        url._port = _coerce_port(components.port)
        url.path = components.path
        url._query = decode_nested_query(components.query)
        return url

    # Components

    @property
    def protocol(self) -> str:
        """Protocol, ``https`` unless one was given. An empty protocol is kept."""
        if self._protocol is None:
            return DEFAULT_PROTOCOL
        return self._protocol

    @protocol.setter
    def protocol(self, value: Optional[str]) -> None:
        self._protocol = value

    scheme = protocol

    @property
    def explicit_protocol(self) -> Optional[str]:
        """Protocol as parsed or set, None when it was never given."""
        return self._protocol

    @property
    def host(self) -> str:
        return self._host

    @host.setter
    def host(self, value: str) -> None:
        self._host = value

    @property
    def port(self) -> Optional[int]:
        return self._port

    @port.setter
    def port(self, value: Optional[Union[int, str]]) -> None:
        self._port = None if value is None else int(value)

    @property
    def path(self) -> Optional[str]:
        """Path, always starting with ``/`` when present."""
        return self._path

    @path.setter
    def path(self, value: Optional[str]) -> None:
        if not value:
            self._path = None
        elif value.startswith(SLASH):
            self._path = value
        else:
            self._path = SLASH + value

    @property
    def query(self) -> Dict[str, Any]:
        return self._query

    @query.setter
    def query(self, value: Optional[Mapping[str, Any]]) -> None:
        self._query = stringify_keys(value) if value else {}

    # Domain components

    @property
    def tld(self) -> Optional[str]:
        return hostname.tld(self._host)

    @tld.setter
    def tld(self, value: Optional[str]) -> None:
        parts = self._anchored_parts()
        self._recompose(parts._replace(tld=value), compact=True)

    @property
    def sld(self) -> str:
        return hostname.sld(self._host)

    @sld.setter
    def sld(self, value: Optional[str]) -> None:
        parts = hostname.split_host(self._host)
        self._recompose(parts._replace(sld=value), compact=True)

    @property
    def subdomain(self) -> Optional[str]:
        return hostname.subdomain(self._host)

    @subdomain.setter
    def subdomain(self, value: str) -> None:
        parts = self._anchored_parts()
        self._recompose(parts._replace(subdomain=value), compact=False)

    @property
    def domain(self) -> str:
        return hostname.domain(self._host)

    def _anchored_parts(self) -> HostParts:
        parts = hostname.split_host(self._host)
        if parts.tld is None:
            raise InvalidDomainOperation(str(self))
        return parts

    def _recompose(self, parts: HostParts, compact: bool) -> None:
        try:
            new_host = hostname.join_host(parts, compact=compact)
        except ValueError as exc:
            raise InvalidDomainOperation(str(self), str(exc)) from exc

        logger.debug("Host changed from %r to %r", self._host, new_host)
        self._host = new_host

    # Mutation

    def join(self, *paths: str) -> "URL":
        """
        Append path segments to the current path.

        One leading and one trailing slash are stripped from every segment,
        except that the last segment keeps its trailing slash. Empty
        segments are dropped.

        Returns:
            This URL.
        """
        if not paths:
            return self

        last = len(paths) - 1
        segments = [
            _strip_slashes(path, keep_trailing=index == last)
            for index, path in enumerate(paths)
        ]
        if self._path:
            segments.insert(0, _strip_slashes(self._path))

        self.path = SLASH.join(segment for segment in segments if segment)
        return self

    def merge(self, query: Mapping[str, Any]) -> "URL":
        """
        Shallow-merge ``query`` into the current query.

        Keys are converted to strings first. Values from ``query`` win;
        nested mappings are replaced, not merged.

        Returns:
            This URL.
        """
        self._query = {**self._query, **stringify_keys(query)}
        return self

    def copy(self) -> "URL":
        """Independent copy of this URL."""
        clone = type(self).__new__(type(self))
        clone._protocol = self._protocol
        clone._host = self._host
        clone._port = self._port
        clone._path = self._path
        clone._query = copy.deepcopy(self._query)
        return clone

    # Conversion

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (URL, str)):
            return str(self) == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
