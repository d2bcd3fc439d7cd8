# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TrieDict exceptions."""

from __future__ import annotations


class TrieDictError(Exception):
    """Base exception for TrieDict errors."""

    pass


class InvalidKeyError(TrieDictError, ValueError):
    """Raised when a key is empty or holds a code outside the 0-255 range."""

    pass


class KeyNotFoundError(TrieDictError, KeyError):
    """Raised when a key has no entry in the TrieDict."""

    pass
