"""src/looseurl/core/__init__.py

Parsing, host decomposition and stringification for looseurl.

These modules work on plain strings and know nothing about the URL class,
except the stringifier, which reads any object shaped like a URL.
"""

from .host import HostParts, join_host, split_host
from .parser import Components, parse_components
from .stringify import URLView, to_string

__all__ = [
    "Components",
    "HostParts",
    "URLView",
    "join_host",
    "parse_components",
    "split_host",
    "to_string",
]
