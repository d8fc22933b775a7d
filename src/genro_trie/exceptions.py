# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Trie exceptions."""

from __future__ import annotations


class TrieError(Exception):
    """Base exception for Trie errors."""

    pass


class KeyNotFoundError(TrieError, KeyError):
    """Raised when a key does not resolve to a stored entry.

    Covers both a missing path and a path that only exists as a branch
    toward longer keys.
    """

    pass


class ValueConversionError(TrieError, TypeError):
    """Raised when a value cannot be represented as the trie's value type."""

    pass
