"""src/looseurl/utils/codec.py

Nested query string codec and path escaping for looseurl.

Query strings use the bracket convention understood by most web frameworks::

    a=1                 -> {"a": "1"}
    a[b]=c              -> {"a": {"b": "c"}}
    a[]=1&a[]=2         -> {"a": ["1", "2"]}
    a[][b]=1&a[][c]=2   -> {"a": [{"b": "1", "c": "2"}]}
    flag                -> {"flag": None}
"""

import logging
import re
import urllib.parse
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from looseurl.exceptions import QueryDecodeError

__all__ = [
    "PARAM_DEPTH_LIMIT",
    "decode_nested_query",
    "encode_nested_query",
    "escape_path",
    "stringify_keys",
]

logger = logging.getLogger(__name__)

_PAIR_SEPARATOR = re.compile(r"& *")
_KEY_SEGMENTS = re.compile(r"[\[\]]+")

# RFC 2396 reserved and unreserved marks, plus "%" so escaped paths survive.
_PATH_SAFE = "-_.!~*'();/?:@&=+$,[]%"

# Bracket nesting accepted in query keys before the rest is kept flat
PARAM_DEPTH_LIMIT = 32


def escape_path(path: str) -> str:
    """Percent-encode characters that may not appear verbatim in a path."""
    return urllib.parse.quote(path, safe=_PATH_SAFE)


def _escape(text: str) -> str:
    return urllib.parse.quote_plus(text, safe="*")


def _unescape(text: str) -> str:
    return urllib.parse.unquote_plus(text)


def stringify_keys(value: Any) -> Any:
    """Recursively convert every mapping key in ``value`` to ``str``."""
    if isinstance(value, Mapping):
        return {str(k): stringify_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [stringify_keys(item) for item in value]
    return value


def decode_nested_query(
    query: Optional[str],
    *,
    strict: bool = False,
    depth_limit: int = PARAM_DEPTH_LIMIT,
) -> Dict[str, Any]:
    """
    Decode a query string into a (possibly nested) dictionary.

    Args:
        query: Raw query string without the leading ``?``.
        strict: Raise on structurally conflicting keys (``a=1&a[b]=2``)
            instead of letting the later key win.
        depth_limit: Deepest bracket nesting decoded. Deeper keys keep
            their remaining brackets as a literal key.

    Returns:
        Dictionary with string keys. Empty when ``query`` is empty or None.

    Raises:
        QueryDecodeError: If ``strict`` is set and two keys conflict or a
            key nests deeper than ``depth_limit``.
    """
    params: Dict[str, Any] = {}
    if not query:
        return params

    for pair in _PAIR_SEPARATOR.split(query):
        if not pair:
            continue
        key, sep, value = pair.partition("=")
        _normalize(
            params,
            _unescape(key),
            _unescape(value) if sep else None,
            0,
            strict,
            depth_limit,
        )
    return params


def _normalize(
    params: Dict[str, Any],
    name: str,
    value: Optional[str],
    depth: int,
    strict: bool,
    depth_limit: int,
) -> Any:
    # pylint: disable=too-many-arguments,too-many-branches
    if depth >= depth_limit:
        if strict:
            raise QueryDecodeError(f"Query key nested deeper than {depth_limit} levels")
        logger.debug(
            "Query key nested deeper than %d levels, keeping %.40r flat",
            depth_limit,
            name,
        )
        params[name] = value
        return params

    if depth == 0:
        # A leading "[" is part of the key at the top level
        start = name.find("[", 1)
        if start != -1:
            key, after = name[:start], name[start:]
        else:
            key, after = name, ""
    elif name.startswith("[]"):
        key, after = "[]", name[2:]
    elif name.startswith("[") and name.find("]", 1) != -1:
        end = name.find("]", 1)
        key, after = name[1:end], name[end + 1 :]
    else:
        key, after = name, ""

    if not key:
        return params

    if after == "":
        if key == "[]" and depth != 0:
            return [value]
        params[key] = value
    elif after == "[":
        params[name] = value
    elif after == "[]":
        _container(params, key, list, strict).append(value)
    elif after.startswith("[]"):
        # x[][y] puts a dict inside the list
        child_key = after[3:-1]
        if not (
            after[2:3] == "["
            and after.endswith("]")
            and child_key
            and "[" not in child_key
            and "]" not in child_key
        ):
            child_key = after[2:]
        bucket = _container(params, key, list, strict)
        last = bucket[-1] if bucket else None
        if isinstance(last, dict) and not _has_nested_key(last, child_key):
            _normalize(last, child_key, value, depth + 1, strict, depth_limit)
        else:
            bucket.append(
                _normalize({}, child_key, value, depth + 1, strict, depth_limit)
            )
    else:
        child = _container(params, key, dict, strict)
        params[key] = _normalize(
            child, after, value, depth + 1, strict, depth_limit
        )

    return params


def _container(
    params: Dict[str, Any],
    key: str,
    kind: Union[Type[Dict[str, Any]], Type[List[Any]]],
    strict: bool,
) -> Any:
    existing = params.get(key)
    if isinstance(existing, kind):
        return existing

    if existing is not None:
        if strict:
            raise QueryDecodeError(
                f"Expected {kind.__name__} for query key {key!r}, "
                f"got {type(existing).__name__}"
            )
        logger.debug(
            "Query key %r replaced: %s value overwritten by %s",
            key,
            type(existing).__name__,
            kind.__name__,
        )

    fresh = kind()
    params[key] = fresh
    return fresh


def _has_nested_key(params: Dict[str, Any], key: str) -> bool:
    if "[]" in key:
        return False

    current: Any = params
    for part in _KEY_SEGMENTS.split(key):
        if part == "":
            continue
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    return True


def encode_nested_query(value: Any, prefix: Optional[str] = None) -> str:
    """
    Encode a (possibly nested) mapping into a query string.

    Lists become ``key[]=...``, nested mappings ``key[sub]=...`` and None
    values a bare key. Empty lists and mappings produce nothing.

    Args:
        value: Mapping to encode.
        prefix: Key prefix for nested values, used by recursive calls.

    Returns:
        The encoded query string, without a leading ``?``.

    Raises:
        TypeError: If the top-level value is not a mapping.
    """
    if isinstance(value, Mapping):
        parts = (
            encode_nested_query(
                item, f"{prefix}[{key}]" if prefix is not None else str(key)
            )
            for key, item in value.items()
        )
        return "&".join(part for part in parts if part)

    if prefix is None:
        raise TypeError(f"Query must be a mapping, got {type(value).__name__}")

    if isinstance(value, (list, tuple)):
        items = (encode_nested_query(item, f"{prefix}[]") for item in value)
        return "&".join(item for item in items if item)
    if value is None:
        return _escape(prefix)
    return f"{_escape(prefix)}={_escape(str(value))}"
