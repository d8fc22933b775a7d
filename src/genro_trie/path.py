# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Prefix path traversal.

This module walks a trie along the characters of an input string:

- PrefixPathIterator: Lazy walk yielding one node per matched prefix length
- partial_path: Factory for PrefixPathIterator
- find_prefixes: Stored keys that are prefixes of a string

The walk starts at the root (the empty prefix) and stops at the first
character without a matching child, so for a string of length n it yields
at most n + 1 nodes.

Example:
    >>> trie = Trie(['A', 'ABC', 'ABCD', 'BCE'])
    >>> find_prefixes(trie, 'ABCDE')
    ['A', 'ABC', 'ABCD']
"""

from __future__ import annotations

from typing import Iterator

from .node import TrieNode
from .trie import Trie

# (last produced node, offset of the next character); offset -1 means
# nothing has been produced yet
PathState = tuple[TrieNode, int]


class PrefixPathIterator:
    """Lazy walk of the nodes matched by the prefixes of a string.

    The iterator stores only the start node and the string. Traversal
    state is passed explicitly to ``step``, so the same iterator can be
    iterated any number of times, including interleaved, and never
    materializes the whole path.

    Offsets count characters (code points), so a character encoded with
    several bytes is a single step.

    Example:
        >>> it = PrefixPathIterator(trie, 'ABX')
        >>> state = it.initial_state
        >>> node, state = it.step(state)  # root, the empty prefix
        >>> node, state = it.step(state)  # node for 'A'
    """

    __slots__ = ('node', 'string')

    def __init__(self, start: Trie | TrieNode, string: str) -> None:
        """Initialize a PrefixPathIterator.

        Args:
            start: A Trie (walk starts at its root) or a TrieNode.
            string: The string whose prefixes are walked.
        """
        self.node = start.root if isinstance(start, Trie) else start
        self.string = string

    def __repr__(self) -> str:
        return f"PrefixPathIterator({self.string!r})"

    @property
    def initial_state(self) -> PathState:
        """State before the first element has been produced."""
        return self.node, -1

    def step(self, state: PathState) -> tuple[TrieNode, PathState] | None:
        """Produce the element following ``state``.

        Args:
            state: ``initial_state`` or a state returned by a previous step.

        Returns:
            ``(node, next_state)``, or None when the string is exhausted or
            its next character has no matching child.
        """
        node, offset = state
        if offset < 0:
            return self.node, (self.node, 0)
        if offset >= len(self.string):
            return None
        child = node.children.get(self.string[offset])
        if child is None:
            return None
        return child, (child, offset + 1)

    def __iter__(self) -> Iterator[TrieNode]:
        state = self.initial_state
        while True:
            produced = self.step(state)
            if produced is None:
                return
            node, state = produced
            yield node


def partial_path(start: Trie | TrieNode, string: str) -> PrefixPathIterator:
    """Return a PrefixPathIterator over ``string`` starting at ``start``."""
    return PrefixPathIterator(start, string)


def find_prefixes(trie: Trie | TrieNode, string: str) -> list[str]:
    """Find all keys from the trie that are prefixes of ``string``.

    Args:
        trie: The Trie (or subtree node) to search.
        string: The string whose prefixes are checked.

    Returns:
        Matching prefixes in increasing length order. The empty string is
        included when it is a stored key.

    Example:
        >>> trie = Trie(['A', 'ABC', 'ABCD', 'BCE'])
        >>> find_prefixes(trie, 'ABCDE')
        ['A', 'ABC', 'ABCD']
    """
    prefixes = []
    for length, node in enumerate(partial_path(trie, string)):
        if node.terminal:
            prefixes.append(string[:length])
    return prefixes
