"""Helpers shared by the node loaders."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def missing_keys(data: Any, keys: Iterable[str]) -> List[str]:
    """List the keys that are absent (or null) in a document mapping."""
    if not isinstance(data, dict):
        return list(keys)
    return [key for key in keys if data.get(key) is None]


def load_children(
    raw: Any,
    loader: Callable[[Any], Optional[T]],
    *,
    kind: str,
) -> Dict[str, T]:
    """Load every entry of a name-keyed document mapping.

    Entries whose loader returns None are dropped and logged; the remaining
    siblings are still loaded.
    """
    if not isinstance(raw, dict):
        logger.warning("Expected a mapping of %s entries, got %s", kind, type(raw).__name__)
        return {}

    children: Dict[str, T] = {}
    for name, value in raw.items():
        child = loader(value)
        if child is None:
            logger.warning("Dropping malformed %s '%s'", kind, name)
            continue
        children[name] = child
    return children
