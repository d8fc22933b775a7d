# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Trie node class."""

from __future__ import annotations

from typing import Any, Iterator


class TrieNode:
    """A node in a Trie.

    Each node has:
    - children: Mapping from a single character to the owned child node
    - terminal: True if the path to this node is a stored key
    - value: The stored value, meaningful only when terminal is True

    A node may exist only as a branch toward longer keys; presence alone
    never means the path is a key.

    Example:
        >>> node = TrieNode()
        >>> node.terminal
        False
        >>> node.children
        {}
    """

    __slots__ = ('children', 'terminal', 'value')

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.terminal = False
        self.value: Any = None

    def __repr__(self) -> str:
        if self.terminal:
            return f"TrieNode(children={list(self.children)}, value={self.value!r})"
        return f"TrieNode(children={list(self.children)})"

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def child(self, char: str) -> TrieNode | None:
        """Return the child reached through ``char``, or None."""
        return self.children.get(char)

    def iter_keys(self, prefix: str = '') -> Iterator[str]:
        """Yield the keys stored in this subtree, depth first.

        Args:
            prefix: String prepended to every emitted key, normally the
                path that leads to this node.

        Yields:
            ``prefix`` followed by the path below this node, for every
            terminal node. Sibling order is not part of the contract.
        """
        for key, _ in self.iter_items(prefix):
            yield key

    def iter_items(self, prefix: str = '') -> Iterator[tuple[str, Any]]:
        """Yield (key, value) pairs stored in this subtree, depth first."""
        # explicit stack: deep keys would exhaust the recursion limit
        stack: list[tuple[str, TrieNode]] = [(prefix, self)]
        while stack:
            path, node = stack.pop()
            if node.terminal:
                yield path, node.value
            for char, child in node.children.items():
                stack.append((path + char, child))
