# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Functions for filling a TrieDict from other sources."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import TrieDict


def load_from_dict(trie: TrieDict, source: dict[Any, Any]) -> None:
    """Insert every key/value pair of a dict."""
    for key, value in source.items():
        trie.insert(key, value)


def load_from_list(trie: TrieDict, source: list[Any]) -> None:
    """Insert (key, value) tuples from a list.

    Raises:
        ValueError: If an item is not a 2-item tuple or list.
    """
    for item in source:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise ValueError(
                f"list items must be (key, value) pairs, got {item!r}"
            )
        key, value = item
        trie.insert(key, value)


def load_from_triedict(trie: TrieDict, source: TrieDict) -> None:
    """Copy every entry of another TrieDict, keeping keys as bytes."""
    for key, value in source.iter_items(as_bytes=True):
        trie.insert(key, value)
