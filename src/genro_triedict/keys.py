# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Key handling for TrieDict.

Keys are byte sequences. A ``str`` key is read one character at a time,
each character standing for one byte (latin-1 style); characters above
U+00FF are not transcoded; the trie walk rejects them when it reaches
them. ``bytes``-like keys are used as they are.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

Key = Union[str, bytes, bytearray, memoryview]

MAX_CODE = 255


def iter_key_codes(key: Key) -> Iterator[int]:
    """Yield one integer code per key unit.

    Codes are not range checked here, so callers can validate each one
    only when they reach it.

    Raises:
        TypeError: If key is not str or bytes-like.
    """
    if isinstance(key, str):
        return (ord(ch) for ch in key)
    if isinstance(key, (bytes, bytearray)):
        return iter(key)
    if isinstance(key, memoryview):
        return iter(key.tobytes())
    raise TypeError(
        f"key must be str or bytes-like, not {type(key).__name__}"
    )


def is_valid_code(code: int) -> bool:
    """True if ``code`` fits in one byte."""
    return 0 <= code <= MAX_CODE


def codes_to_key(codes: Iterable[int], as_bytes: bool = False) -> str | bytes:
    """Rebuild a key from its byte codes.

    Args:
        codes: Byte values along a trie path.
        as_bytes: If True return bytes, otherwise a str with one
            character per byte.
    """
    data = bytes(codes)
    if as_bytes:
        return data
    return data.decode('latin-1')
