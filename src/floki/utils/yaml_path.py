"""Dotted key paths into parsed YAML documents."""

import logging
import re
import sys
from typing import Any, List, Mapping, Sequence

from floki.errors import PathLookupError


logger = logging.getLogger(__name__)

# Segments that look like non-negative integers index positionally.
_INDEX_RE = re.compile(r"\+?[0-9]+")


def split_key(key: str) -> List[str]:
    """Split a dotted key such as ``a.b.0.c`` into its segments."""
    return key.split(".")


def _as_index(segment: str):
    """Parse an index segment; too-large numbers stay string keys."""
    if not _INDEX_RE.fullmatch(segment):
        return None
    try:
        index = int(segment)
    except ValueError:
        return None
    if index > sys.maxsize:
        return None
    return index


def _integer_key(node: Mapping, index: int):
    """Find the key equal to ``index`` among plain integer keys only."""
    for key in node:
        # bool and float keys never match an index
        if type(key) is int and key == index:
            return key
    raise KeyError(index)


def resolve_path(document: Any, path: Sequence[str]) -> str:
    """Walk ``document`` along ``path`` and return the string found there.

    Numeric-looking segments are always treated as indices: a sequence is
    indexed by position and a mapping is looked up by the integer key. A
    mapping key made only of digits is therefore unreachable.
    """
    node = document
    for segment in path:
        index = _as_index(segment)
        if index is not None:
            if isinstance(node, (list, tuple)):
                if index >= len(node):
                    raise PathLookupError(
                        segment, path, f"index out of range for {len(node)} items"
                    )
                node = node[index]
            elif isinstance(node, Mapping):
                try:
                    node = node[_integer_key(node, index)]
                except KeyError:
                    raise PathLookupError(segment, path, "no such key") from None
            else:
                raise PathLookupError(
                    segment, path, f"cannot index {type(node).__name__}"
                )
        else:
            if not isinstance(node, Mapping):
                raise PathLookupError(
                    segment, path, f"cannot look up key in {type(node).__name__}"
                )
            if segment not in node:
                raise PathLookupError(segment, path, "no such key")
            node = node[segment]

    if not isinstance(node, str):
        raise PathLookupError(
            path[-1] if path else "", path, f"value is {type(node).__name__}, not a string"
        )
    logger.debug(f"Resolved {'.'.join(path)} to {node}")
    return node
