# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Trie - A prefix tree mapping string keys to values.

This module provides the Trie class, the core container of the
genro-trie library. A Trie owns a root TrieNode; every other node is
reached from the root through exactly one sequence of characters.

Key Features:
    - **Character edges**: One edge per code point, so multi-byte
      characters are a single step
    - **Terminal flag**: A path becomes a key only when its final node is
      marked terminal, so branches toward longer keys are not keys
    - **Typed values**: Each trie holds values of one type, checked before
      an insertion mutates anything
    - **Prefix queries**: Key enumeration scoped to a prefix; see
      ``genro_trie.path`` for walking the prefixes of a string

Example:
    Basic usage::

        trie = Trie()
        trie['car'] = 1
        trie['cart'] = 2

        print(trie['cart'])              # 2
        print('ca' in trie)              # False
        print(trie.keys_with_prefix('car'))  # ['car', 'cart'] in any order

    Named constructors::

        Trie.from_pairs([('a', 1), ('ab', 2)])
        Trie.from_parallel(['a', 'ab'], [1, 2])
        Trie.from_keys(['a', 'ab'])
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, Sequence

from ..conversion import convert_value, infer_value_type
from ..exceptions import KeyNotFoundError
from ..node import TrieNode
from .loading import (
    load_from_keys,
    load_from_mapping,
    load_from_pairs,
    load_from_parallel,
)

logger = logging.getLogger(__name__)

NoneType = type(None)


def _check_key(key: Any) -> None:
    if not isinstance(key, str):
        raise TypeError(f"trie keys must be str, not {type(key).__name__}")


class Trie:
    """A prefix tree with O(len(key)) insertion and lookup.

    Trie provides:
    - insert(key, value) / trie[key] = value: Store a value, overwriting
    - get_item(key) / trie[key]: Strict lookup raising KeyNotFoundError
    - get(key, default): Lookup with default
    - contains(key) / key in trie: Membership
    - subtrie(prefix): Node reached by a prefix, or None
    - keys() / keys_with_prefix(prefix): Key enumeration

    Enumeration order among sibling branches is not specified.

    Attributes:
        root: The root TrieNode, representing the empty key.
        value_type: The type every stored value is converted to, or None
            when any value is accepted.

    Example:
        >>> trie = Trie(['A', 'ABC', 'ABCD', 'BCE'])
        >>> 'ABC' in trie
        True
        >>> 'AB' in trie
        False
    """

    __slots__ = ('_root', '_value_type', '_len')

    def __init__(
        self,
        source: Mapping[str, Any] | list | tuple | None = None,
        value_type: type | None = None,
    ) -> None:
        """Initialize a Trie.

        Args:
            source: Optional initial data. Can be:
                - Mapping: key -> value
                - list/tuple of (key, value) tuples
                - list/tuple of str: bare keys, stored with None values
            value_type: Type of the stored values. If None and a source is
                given, it is inferred as the type shared by all source
                values (``object`` if they differ). If None and no source
                is given, any value is accepted.

        Raises:
            TypeError: If source is not a supported shape.
            ValueConversionError: If a source value does not fit value_type.

        Example:
            >>> Trie({'a': 1, 'b': 2})
            >>> Trie([('a', 1), ('b', 2)], value_type=float)
            >>> Trie(['a', 'b'])  # keys only
        """
        self._root = TrieNode()
        self._value_type = value_type
        self._len = 0

        if source is not None:
            self._load_source(source)

    def _load_source(self, source: Mapping[str, Any] | list | tuple) -> None:
        """Load data from source into this Trie.

        Delegates to the appropriate loading function based on source shape.

        Raises:
            TypeError: If source is not a Mapping, list or tuple.
        """
        if isinstance(source, Mapping):
            if self._value_type is None:
                self._value_type = infer_value_type(source.values())
            load_from_mapping(self, source)
        elif isinstance(source, (list, tuple)):
            if source and all(isinstance(item, str) for item in source):
                if self._value_type is None:
                    self._value_type = NoneType
                load_from_keys(self, source)
            else:
                if self._value_type is None:
                    self._value_type = infer_value_type(
                        item[1] for item in source
                        if isinstance(item, tuple) and len(item) == 2
                    )
                load_from_pairs(self, source)
        else:
            raise TypeError(
                f"source must be Mapping, list or tuple, not {type(source).__name__}"
            )
        logger.debug(
            "Loaded %d keys (value type %s)", self._len, self.value_type_name
        )

    # ==================== Named Constructors ====================

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, Any]], value_type: type | None = None
    ) -> Trie:
        """Build a Trie from (key, value) pairs."""
        pairs = list(pairs)
        if value_type is None:
            value_type = infer_value_type(value for _, value in pairs)
        trie = cls(value_type=value_type)
        load_from_pairs(trie, pairs)
        return trie

    @classmethod
    def from_parallel(
        cls,
        keys: Sequence[str],
        values: Sequence[Any],
        value_type: type | None = None,
    ) -> Trie:
        """Build a Trie where ``keys[i]`` maps to ``values[i]``.

        Raises:
            ValueError: If keys and values differ in length.
        """
        if value_type is None:
            value_type = infer_value_type(values)
        trie = cls(value_type=value_type)
        load_from_parallel(trie, keys, values)
        return trie

    @classmethod
    def from_keys(cls, keys: Iterable[str]) -> Trie:
        """Build a Trie of bare keys; every value is None."""
        trie = cls(value_type=NoneType)
        load_from_keys(trie, keys)
        return trie

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, Any], value_type: type | None = None
    ) -> Trie:
        """Build a Trie from a key -> value mapping."""
        if value_type is None:
            value_type = infer_value_type(mapping.values())
        trie = cls(value_type=value_type)
        load_from_mapping(trie, mapping)
        return trie

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Trie({len(self)} keys, value_type={self.value_type_name})"

    def __len__(self) -> int:
        """Return the number of stored keys."""
        return self._len

    def __iter__(self) -> Iterator[str]:
        """Iterate over stored keys, in no specified order."""
        return self.iter_keys()

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def __getitem__(self, key: str) -> Any:
        return self.get_item(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.insert(key, value)

    @property
    def root(self) -> TrieNode:
        """The root node, representing the empty key."""
        return self._root

    @property
    def value_type(self) -> type | None:
        """The type stored values are converted to (None accepts any)."""
        return self._value_type

    @property
    def value_type_name(self) -> str:
        return 'Any' if self._value_type is None else self._value_type.__name__

    # ==================== Core API ====================

    def insert(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key``, overwriting any previous value.

        The value is converted to the trie's value type before any node
        is created, so a failed insertion leaves the trie unchanged.

        Args:
            key: The key; the empty string addresses the root.
            value: The value to store.

        Returns:
            True if the key was new, False if an existing value was replaced.

        Raises:
            TypeError: If key is not a str.
            ValueConversionError: If value does not fit the value type.
        """
        _check_key(key)
        value = convert_value(value, self._value_type)

        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child

        is_new = not node.terminal
        node.terminal = True
        node.value = value
        if is_new:
            self._len += 1
        return is_new

    def subtrie(self, prefix: str) -> TrieNode | None:
        """Return the node reached by consuming ``prefix``, or None.

        The node is returned whether or not it is terminal.
        """
        _check_key(prefix)
        node = self._root
        for char in prefix:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def get_item(self, key: str) -> Any:
        """Return the value stored under ``key``.

        Raises:
            KeyNotFoundError: If key is not a stored key.
        """
        node = self.subtrie(key)
        if node is None or not node.terminal:
            raise KeyNotFoundError(f"key not found: {key!r}")
        return node.value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        node = self.subtrie(key)
        if node is None or not node.terminal:
            return default
        return node.value

    def contains(self, key: str) -> bool:
        """True if ``key`` is a stored key (not merely a path)."""
        node = self.subtrie(key)
        return node is not None and node.terminal

    # ==================== Iteration ====================

    def iter_keys(self) -> Iterator[str]:
        """Yield every stored key, in no specified order."""
        return self._root.iter_keys()

    def iter_values(self) -> Iterator[Any]:
        """Yield every stored value, matching iter_keys order."""
        for _, value in self._root.iter_items():
            yield value

    def iter_items(self) -> Iterator[tuple[str, Any]]:
        """Yield (key, value) pairs, in no specified order."""
        return self._root.iter_items()

    def keys(self) -> list[str]:
        """Return list of every stored key, in no specified order."""
        return list(self.iter_keys())

    def values(self) -> list[Any]:
        """Return list of every stored value."""
        return list(self.iter_values())

    def items(self) -> list[tuple[str, Any]]:
        """Return list of (key, value) pairs."""
        return list(self.iter_items())

    def keys_with_prefix(self, prefix: str) -> list[str]:
        """Return the stored keys starting with ``prefix``.

        Args:
            prefix: The prefix; ``''`` returns every key.

        Returns:
            Keys in no specified order, or an empty list when no key
            starts with ``prefix``.

        Example:
            >>> trie = Trie(['A', 'ABC', 'ABCD', 'BCE'])
            >>> sorted(trie.keys_with_prefix('AB'))
            ['ABC', 'ABCD']
        """
        node = self.subtrie(prefix)
        if node is None:
            return []
        return list(node.iter_keys(prefix))
