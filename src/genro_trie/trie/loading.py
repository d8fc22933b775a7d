# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for populating a Trie from existing data.

Each loader inserts entries one at a time through ``Trie.insert``, so the
value type of the target trie is enforced for every entry.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Trie


def load_from_mapping(trie: Trie, source: Mapping[str, Any]) -> None:
    """Insert every key/value of a mapping."""
    for key, value in source.items():
        trie.insert(key, value)


def load_from_pairs(trie: Trie, source: Iterable[tuple[str, Any]]) -> None:
    """Insert (key, value) pairs.

    Raises:
        ValueError: If an item is not a 2-tuple.
    """
    for item in source:
        if not isinstance(item, tuple) or len(item) != 2:
            raise ValueError(f"expected (key, value) tuple, got {item!r}")
        key, value = item
        trie.insert(key, value)


def load_from_parallel(
    trie: Trie, keys: Sequence[str], values: Sequence[Any]
) -> None:
    """Insert ``keys[i]`` with ``values[i]``.

    Raises:
        ValueError: If the sequences have different lengths.
    """
    if len(keys) != len(values):
        raise ValueError(
            f"keys and values differ in length ({len(keys)} != {len(values)})"
        )
    for key, value in zip(keys, values):
        trie.insert(key, value)


def load_from_keys(trie: Trie, keys: Iterable[str]) -> None:
    """Insert bare keys, each with a None value."""
    for key in keys:
        trie.insert(key, None)
