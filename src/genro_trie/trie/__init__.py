# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Trie package - Prefix tree mapping string keys to values.

The package is organized into:
- core: Main Trie class with insertion, lookup and key enumeration
- loading: Functions for populating a Trie from mappings, pairs,
  parallel sequences or bare keys

Example:
    >>> from genro_trie import Trie
    >>> trie = Trie({'car': 1, 'cart': 2})
    >>> trie['cart']
    2
"""

from .core import Trie

__all__ = ["Trie"]
