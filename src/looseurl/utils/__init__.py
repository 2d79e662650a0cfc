"""src/looseurl/utils/__init__.py"""

from .codec import decode_nested_query, encode_nested_query, escape_path, stringify_keys

__all__ = [
    "decode_nested_query",
    "encode_nested_query",
    "escape_path",
    "stringify_keys",
]
