# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Trie - Prefix tree mapping string keys to typed values.

A lightweight, zero-dependency library providing a character trie with
point lookup, prefix-scoped key enumeration and lazy prefix-path walks
for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import (
    KeyNotFoundError,
    TrieError,
    ValueConversionError,
)
from .node import TrieNode
from .path import PrefixPathIterator, find_prefixes, partial_path
from .trie import Trie

__all__ = [
    # Core classes
    "Trie",
    "TrieNode",
    # Prefix paths
    "PrefixPathIterator",
    "partial_path",
    "find_prefixes",
    # Exceptions
    "TrieError",
    "KeyNotFoundError",
    "ValueConversionError",
]
