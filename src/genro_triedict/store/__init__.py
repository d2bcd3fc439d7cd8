# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TrieDict package - Byte-branching trie dictionary.

The package is organized into:
- core: Main TrieDict class with lookup, insertion, removal and iteration
- loading: Functions for loading data from dict, list, or TrieDict sources

Example:
    >>> from genro_triedict import TrieDict
    >>> trie = TrieDict()
    >>> trie['cat'] = 1
    >>> trie['cat']
    1
"""

from .core import TrieDict

__all__ = ["TrieDict"]
