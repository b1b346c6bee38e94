from __future__ import annotations

import struct
from typing import Iterator

_WORD = struct.Struct("<Q")


def message_bytes(message: bytes) -> bytes:
    """Copy a bytes-like message to bytes, rejecting anything else with TypeError."""
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError("message must be bytes-like")
    return bytes(message)


def block_count(length: int) -> int:
    """Number of words absorbed for a message of ``length`` bytes, final block included."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return length // 8 + 1


def last_block(tail: bytes, total_length: int) -> int:
    """
    Build the final padded word.

    The leftover bytes fill the low end of the word, zeros pad it to seven bytes,
    and the top byte holds ``total_length mod 256``, the length of the whole
    message rather than of ``tail``.

    Args:
        tail: The 0-7 bytes left after the last full 8-byte chunk
        total_length: Length in bytes of the entire message

    Raises:
        ValueError: If tail is longer than 7 bytes
    """
    if len(tail) > 7:
        raise ValueError(f"tail must be at most 7 bytes, got {len(tail)}")
    b = (total_length & 0xFF) << 56
    for idx, value in enumerate(bytes(tail)):
        b |= value << (8 * idx)
    return b


def iter_blocks(message: bytes) -> Iterator[int]:
    """
    Yield every 64-bit word to absorb for ``message``.

    Full 8-byte chunks are read little-endian; the padded final word from
    :func:`last_block` is always yielded, so even an empty message yields one word.
    """
    raw = message_bytes(message)
    offset_limit = len(raw) - (len(raw) % 8)
    for idx in range(0, offset_limit, 8):
        yield _WORD.unpack_from(raw, idx)[0]
    yield last_block(raw[offset_limit:], len(raw))


__all__ = ["block_count", "iter_blocks", "last_block", "message_bytes"]
