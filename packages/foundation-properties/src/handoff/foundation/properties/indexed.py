"""Indexed sequences stored as numbered keys.

A sequence under ``prefix`` occupies ``prefix0``, ``prefix1``, ... in the
raw store. Reading stops at the first missing index, so a gap truncates the
sequence there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from handoff.foundation.properties.exceptions import NullItemError
from handoff.foundation.properties.list_codec import LIST_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, MutableMapping

logger = logging.getLogger(__name__)


def indexed_key(prefix: str, index: int) -> str:
    """Return the raw key for ``index`` within the sequence ``prefix``."""
    return f"{prefix}{index}"


def add_list(
    store: MutableMapping[str, str],
    items: Iterable[Any] | None,
    prefix: str,
) -> int:
    """Write ``items`` under numbered keys starting at ``prefix0``.

    Each item's string form is split on commas and every piece gets its own
    key, so one item can occupy several indexes. The whole input is checked
    before anything is written.

    Args:
        store: Raw key/value store to write into.
        items: Items to store. ``None`` or empty writes nothing.
        prefix: Key prefix.

    Returns:
        Number of keys written.

    Raises:
        NullItemError: If any item is ``None``. Nothing is written.
    """
    if not items:
        return 0

    entries: list[tuple[str, str]] = []
    for position, item in enumerate(items):
        if item is None:
            raise NullItemError(prefix, indexed_key(prefix, len(entries)), position)
        for piece in str(item).split(LIST_SEPARATOR):
            entries.append((indexed_key(prefix, len(entries)), piece))

    store.update(entries)
    logger.debug("Stored %d indexed entries under %r", len(entries), prefix)
    return len(entries)


def get_string_list(store: Mapping[str, str], prefix: str) -> list[str]:
    """Read the sequence under ``prefix`` up to the first missing index.

    Args:
        store: Raw key/value store.
        prefix: Key prefix.

    Returns:
        Values in index order; empty when ``prefix0`` is absent.
    """
    result: list[str] = []
    while (value := store.get(indexed_key(prefix, len(result)))) is not None:
        result.append(value)
    return result
