# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TrieDict node class."""

from __future__ import annotations

from typing import Any

FANOUT = 256


class _Missing:
    """Marker for a node that stores no value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class TrieNode:
    """A node in a TrieDict.

    Each node has:
    - children: 256 slots indexed by byte value, each None or a TrieNode
    - child_count: number of filled slots
    - value: the stored payload, or MISSING if no key ends here

    A node owns its children exclusively, so the nodes always form a
    strict tree.

    Example:
        >>> node = TrieNode()
        >>> child = node.add_child(ord('a'))
        >>> node.child_count
        1
        >>> child.has_value
        False
    """

    __slots__ = ('children', 'child_count', 'value')

    def __init__(self, value: Any = MISSING) -> None:
        """Initialize a TrieNode.

        Args:
            value: Optional stored value. Defaults to MISSING (routing node).
        """
        self.children: list[TrieNode | None] = [None] * FANOUT
        self.child_count = 0
        self.value = value

    def __repr__(self) -> str:
        return f"TrieNode(children={self.child_count}, value={self.value!r})"

    @property
    def has_value(self) -> bool:
        """True if a key terminates at this node."""
        return self.value is not MISSING

    @property
    def is_dead(self) -> bool:
        """True if the node has neither children nor a value."""
        return self.child_count == 0 and self.value is MISSING

    def get_child(self, code: int) -> TrieNode | None:
        """Return the child for byte ``code``, or None."""
        return self.children[code]

    def add_child(self, code: int) -> TrieNode:
        """Return the child for byte ``code``, creating it if needed."""
        child = self.children[code]
        if child is None:
            child = TrieNode()
            self.children[code] = child
            self.child_count += 1
        return child

    def detach_child(self, code: int) -> TrieNode:
        """Unlink and return the child for byte ``code``.

        Raises:
            KeyError: If the slot is empty.
        """
        child = self.children[code]
        if child is None:
            raise KeyError(f"No child at byte {code}")
        self.children[code] = None
        self.child_count -= 1
        return child

    def iter_children(self):
        """Yield (code, child) pairs for filled slots in byte order."""
        for code, child in enumerate(self.children):
            if child is not None:
                yield code, child

    def clear_children(self) -> None:
        """Drop every child subtree."""
        self.children = [None] * FANOUT
        self.child_count = 0

    def clear_value(self) -> Any:
        """Drop the stored value and return it."""
        value = self.value
        self.value = MISSING
        return value
