# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TrieDict - A byte-branching trie used as a dictionary.

This module provides the TrieDict class, a mapping from byte-sequence keys
to arbitrary values. Every node branches on one byte of the key, so a key
of length n is a path of n edges from the root.

Key Features:
    - **Byte keys**: str keys (one character per byte) or bytes-like keys
    - **O(1) child lookup**: each node holds a 256-slot child array
    - **Pruning**: removing a key releases every node left without
      children or value, up to the first ancestor still in use
    - **Mapping protocol**: ``trie[key]``, ``key in trie``, ``del trie[key]``,
      ``len(trie)`` and iteration over keys

Error policy:
    - ``get``/``remove`` raise InvalidKeyError for codes outside 0-255 and
      KeyNotFoundError for absent keys.
    - ``contains`` never raises, it answers False for both.

Example:
    Basic usage::

        trie = TrieDict()
        trie.insert('cat', 1)
        trie['car'] = 2

        print(trie['cat'])      # 1
        print('ca' in trie)     # False
        trie.remove('car')
        print(trie.key_set())   # {'cat'}
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from ..exceptions import InvalidKeyError, KeyNotFoundError
from ..keys import Key, codes_to_key, is_valid_code, iter_key_codes
from ..node import MISSING, TrieNode
from .loading import load_from_dict, load_from_list, load_from_triedict

logger = logging.getLogger(__name__)


def _invalid_code_error(key: Key, code: int, position: int) -> InvalidKeyError:
    return InvalidKeyError(
        f"Invalid key {key!r}: code {code} at position {position} "
        f"is out of range 0-255"
    )


class TrieDict:
    """A dictionary stored as a trie of byte-indexed nodes.

    TrieDict provides:
    - contains(key) / key in trie: membership test, never raises
    - get(key) / trie[key]: lookup
    - insert(key, value) / trie[key] = value: insert or overwrite
    - remove(key) / del trie[key]: removal with pruning
    - key_set(): every stored key

    The root node is created with the TrieDict and is never detached.

    Example:
        >>> trie = TrieDict({'cat': 1, 'dog': 3})
        >>> trie.get('cat')
        1
        >>> trie.contains('ca')
        False
    """

    __slots__ = ('_root', '_size')

    def __init__(self, source: dict | list | TrieDict | None = None) -> None:
        """Initialize a TrieDict.

        Args:
            source: Optional initial data. Can be:
                - dict: key/value pairs
                - list: list of (key, value) tuples
                - TrieDict: copy of another TrieDict

        Example:
            >>> TrieDict({'a': 1, 'b': 2})
            >>> TrieDict([('x', 1), (b'y', 2)])
            >>> TrieDict(other_trie)  # copy
        """
        self._root = TrieNode()
        self._size = 0

        if source is not None:
            self.update(source)

    def update(self, source: dict | list | TrieDict) -> None:
        """Insert every entry from source.

        Args:
            source: Data to load (dict, list, or TrieDict).

        Raises:
            TypeError: If source is not dict, list, or TrieDict.
        """
        if isinstance(source, dict):
            load_from_dict(self, source)
        elif isinstance(source, TrieDict):
            load_from_triedict(self, source)
        elif isinstance(source, list):
            load_from_list(self, source)
        else:
            raise TypeError(
                f"source must be dict, list, or TrieDict, not {type(source).__name__}"
            )

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing stored keys."""
        return f"TrieDict({self.keys()!r})"

    def __len__(self) -> int:
        """Return the number of stored keys."""
        return self._size

    def __iter__(self) -> Iterator[str]:
        """Iterate over stored keys in ascending byte order."""
        return self.iter_keys()

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __getitem__(self, key: Key) -> Any:
        return self.get(key)

    def __setitem__(self, key: Key, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Key) -> None:
        self.remove(key)

    @property
    def root(self) -> TrieNode:
        """The root node."""
        return self._root

    # ==================== Traversal ====================

    def _validated_codes(self, key: Key) -> list[int]:
        """Return the key codes, checking every one before any traversal.

        Raises:
            InvalidKeyError: If the key is empty or a code is out of range.
        """
        codes = list(iter_key_codes(key))
        if not codes:
            raise InvalidKeyError("Empty key")
        for position, code in enumerate(codes):
            if not is_valid_code(code):
                raise _invalid_code_error(key, code, position)
        return codes

    def _find_node(self, key: Key) -> TrieNode:
        """Return the node holding key's value.

        Raises:
            InvalidKeyError: If the key is malformed.
            KeyNotFoundError: If the path is missing or holds no value.
        """
        node: TrieNode | None = self._root
        for code in self._validated_codes(key):
            node = node.get_child(code)
            if node is None:
                raise KeyNotFoundError(f"Key {key!r} not found")
        if not node.has_value:
            raise KeyNotFoundError(f"Key {key!r} not found")
        return node

    def _iter_valued(self) -> Iterator[tuple[list[int], TrieNode]]:
        """Yield (codes, node) for every node holding a value.

        Depth first, ascending byte order, with an explicit stack so long
        keys do not hit the recursion limit.
        """
        stack: list[tuple[list[int], TrieNode]] = [([], self._root)]
        while stack:
            path, node = stack.pop()
            if node.has_value:
                yield path, node
            for code, child in reversed(list(node.iter_children())):
                stack.append((path + [code], child))

    # ==================== Core API ====================

    def contains(self, key: object) -> bool:
        """Check if a key is present.

        Malformed keys (empty, wrong type, codes above 255) give False
        instead of raising.
        """
        try:
            codes = iter_key_codes(key)  # type: ignore[arg-type]
        except TypeError:
            return False

        node: TrieNode | None = self._root
        walked = False
        for code in codes:
            if not is_valid_code(code):
                return False
            node = node.get_child(code)
            if node is None:
                return False
            walked = True
        return walked and node.has_value

    def get(self, key: Key, default: Any = MISSING) -> Any:
        """Get the value stored under key.

        Args:
            key: The key to look up.
            default: Returned instead of raising when the key is absent.

        Returns:
            The stored value, or default.

        Raises:
            InvalidKeyError: If the key is empty or a code is out of range.
                Raised even when a default is given.
            KeyNotFoundError: If the key is absent and no default is given.
        """
        try:
            return self._find_node(key).value
        except KeyNotFoundError:
            if default is MISSING:
                raise
            return default

    def insert(self, key: Key, value: Any) -> None:
        """Insert value under key, overwriting any previous value.

        Codes are checked one at a time while walking, so when a code
        deep in the key is invalid, nodes for the valid prefix have
        already been created. They hold no value and are not reported
        as keys.

        Raises:
            InvalidKeyError: If the key is empty or a code is out of range.
        """
        node = self._root
        depth = 0
        for code in iter_key_codes(key):
            if not is_valid_code(code):
                if depth:
                    logger.debug(
                        "insert of %r left a %d-node path without value",
                        key, depth,
                    )
                raise _invalid_code_error(key, code, depth)
            node = node.add_child(code)
            depth += 1

        if not depth:
            raise InvalidKeyError("Empty key")

        if not node.has_value:
            self._size += 1
        node.value = value

    def remove(self, key: Key) -> None:
        """Remove key and prune the nodes it leaves unused.

        Raises:
            InvalidKeyError: If the key is empty or a code is out of range.
            KeyNotFoundError: If the key is absent.
        """
        self._remove(key)

    def _remove(self, key: Key) -> Any:
        """Remove key, prune, and return the removed value."""
        path: list[tuple[TrieNode, int]] = []
        node: TrieNode | None = self._root
        for code in self._validated_codes(key):
            child = node.get_child(code)
            if child is None:
                raise KeyNotFoundError(f"Key {key!r} not found")
            path.append((node, code))
            node = child
        if not node.has_value:
            raise KeyNotFoundError(f"Key {key!r} not found")

        value = node.clear_value()
        self._size -= 1

        released = 0
        for parent, code in reversed(path):
            if not parent.children[code].is_dead:
                break
            parent.detach_child(code)
            released += 1
        if released:
            logger.debug("removed %r, pruned %d node(s)", key, released)
        return value

    def pop(self, key: Key, default: Any = MISSING) -> Any:
        """Remove key and return its value.

        Args:
            key: The key to remove.
            default: Returned when the key is absent.

        Raises:
            InvalidKeyError: If the key is malformed.
            KeyNotFoundError: If the key is absent and no default is given.
        """
        try:
            return self._remove(key)
        except KeyNotFoundError:
            if default is MISSING:
                raise
            return default

    def clear(self) -> None:
        """Remove every key."""
        self._root.clear_children()
        self._root.clear_value()
        self._size = 0

    def key_set(self, as_bytes: bool = False) -> set[str] | set[bytes]:
        """Return the set of stored keys.

        Args:
            as_bytes: If True keys are bytes, otherwise str with one
                character per byte.
        """
        return set(self.iter_keys(as_bytes=as_bytes))

    # ==================== Iteration ====================

    def iter_keys(self, as_bytes: bool = False) -> Iterator[str | bytes]:
        """Yield keys in ascending byte order."""
        for path, _node in self._iter_valued():
            yield codes_to_key(path, as_bytes)

    def iter_values(self) -> Iterator[Any]:
        """Yield values in key order."""
        for _path, node in self._iter_valued():
            yield node.value

    def iter_items(self, as_bytes: bool = False) -> Iterator[tuple[str | bytes, Any]]:
        """Yield (key, value) pairs in key order."""
        for path, node in self._iter_valued():
            yield codes_to_key(path, as_bytes), node.value

    def keys(self) -> list[str]:
        """Return list of keys in ascending byte order."""
        return list(self.iter_keys())

    def values(self) -> list[Any]:
        """Return list of values in key order."""
        return list(self.iter_values())

    def items(self) -> list[tuple[str, Any]]:
        """Return list of (key, value) pairs in key order."""
        return list(self.iter_items())
