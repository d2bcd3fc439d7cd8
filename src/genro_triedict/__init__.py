# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TrieDict - A dictionary with byte-sequence keys stored as a trie.

A lightweight, zero-dependency library for the Genro ecosystem (Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import InvalidKeyError, KeyNotFoundError, TrieDictError
from .node import MISSING, TrieNode
from .store import TrieDict

__all__ = [
    # Core classes
    "TrieDict",
    "TrieNode",
    "MISSING",
    # Exceptions
    "TrieDictError",
    "InvalidKeyError",
    "KeyNotFoundError",
]
