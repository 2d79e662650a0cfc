"""src/looseurl/__init__.py

looseurl - Lenient URL value type for Python.

looseurl parses loosely-structured URL strings (missing protocols, odd
protocol characters, URLs nested inside paths) into protocol, host, port,
path and query, lets you edit them, and turns them back into a canonical
string. It has no dependencies outside the standard library.

Key Features:
    - Lenient parsing: ``parse()`` returns None instead of raising
    - Domain decomposition (subdomain, SLD, TLD) with editable parts
    - Path joining and nested query merging (``a[b]=c`` style)
    - Memory optimized with __slots__

Example:
    Parsing::

        import looseurl

        url = looseurl.parse("http://www.example.com:8080/docs?page=1")
        url.protocol   # "http"
        url.subdomain  # "www"
        url.port       # 8080
        url.query      # {"page": "1"}

    Editing::

        url = looseurl.parse("example.com")
        url.join("api", "v1/").merge({"filter": {"tag": "news"}})
        url.subdomain = "api"
        str(url)  # "https://api.example.com/api/v1/?filter%5Btag%5D=news"
"""

import logging
from typing import Any, Optional

from looseurl.exceptions import InvalidDomainOperation, LooseURLError, QueryDecodeError
from looseurl.url import URL
from looseurl.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())


def parse(raw: Any) -> Optional[URL]:
    """Parse ``raw`` into a URL, or return None if there is nothing to parse."""
    return URL.parse(raw)


__all__ = [
    "URL",
    "parse",
    "LooseURLError",
    "InvalidDomainOperation",
    "QueryDecodeError",
    "__version__",
]
