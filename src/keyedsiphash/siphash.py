from __future__ import annotations

import struct
from typing import Optional, Union

from .blocks import iter_blocks, last_block, message_bytes
from .config import SIPHASH_1_3, SIPHASH_2_4, SipParams, check_rounds, resolve_params
from .encoding import Encoded, OutputStyle, encode
from .state import SipState, absorb_block, finalize, init_state

_WORD = struct.Struct("<Q")


def hash(key: bytes, message: bytes, c: int = 2, d: int = 4) -> int:
    """
    One-shot SipHash-c-d of ``message`` under a 16-byte ``key``.

    Args:
        key: 16-byte key
        message: Bytes-like message of any length
        c: Compression rounds per block (default 2)
        d: Finalization rounds (default 4)

    Returns:
        The 64-bit output as an unsigned int.

    Raises:
        TypeError: If key or message is not bytes-like
        InvalidKeyLength: If key is not exactly 16 bytes
        InvalidRoundCount: If c or d is below one
    """
    check_rounds("c", c)
    check_rounds("d", d)
    state = init_state(key)
    for word in iter_blocks(message):
        absorb_block(state, word, c)
    return finalize(state, d)


def hash_r(message: bytes, key: bytes, c: int = 2, d: int = 4) -> int:
    """:func:`hash` with message and key swapped, for pipelines keyed on the message."""
    return hash(key, message, c, d)


def hash_formatted(
    key: bytes,
    message: bytes,
    c: int = 2,
    d: int = 4,
    style: Union[OutputStyle, str] = OutputStyle.LOWER_HEX,
) -> Encoded:
    """One-shot hash rendered with :func:`keyedsiphash.encoding.encode`."""
    return encode(hash(key, message, c, d), style)


class SipHash:
    """
    Pure-Python SipHash-c-d with a streaming API.

    The interface mirrors hashlib-style objects and returns 64-bit digests.
    Reading a digest finalizes a copy of the running state, so ``update`` may
    keep being called afterwards.
    """

    digest_size = 8
    block_size = 8

    def __init__(self, key: bytes, c: int = 2, d: int = 4):
        self._params = SipParams(c, d)
        self._state = init_state(key)
        self._tail = b""
        self._total_len = 0

    @property
    def name(self) -> str:
        return self._params.name

    @property
    def params(self) -> SipParams:
        return self._params

    @property
    def state(self) -> SipState:
        """A snapshot of the absorbed state, excluding any buffered tail bytes."""
        return self._state.copy()

    def copy(self) -> "SipHash":
        dup = self.__class__.__new__(self.__class__)
        dup._params = self._params
        dup._state = self._state.copy()
        dup._tail = self._tail
        dup._total_len = self._total_len
        return dup

    def update(self, data: bytes) -> "SipHash":
        data = message_bytes(data)
        raw = self._tail + data
        self._total_len += len(data)
        c = self._params.c

        offset_limit = len(raw) - (len(raw) % 8)
        for idx in range(0, offset_limit, 8):
            absorb_block(self._state, _WORD.unpack_from(raw, idx)[0], c)

        self._tail = raw[offset_limit:]
        return self

    def intdigest(self) -> int:
        state = self._state.copy()
        absorb_block(state, last_block(self._tail, self._total_len), self._params.c)
        return finalize(state, self._params.d)

    def digest(self) -> bytes:
        return _WORD.pack(self.intdigest())

    def hexdigest(self) -> str:
        return self.digest().hex()


class SipHash24(SipHash):
    """SipHash-2-4, the variant recommended for general use."""

    def __init__(self, key: bytes):
        super().__init__(key, SIPHASH_2_4.c, SIPHASH_2_4.d)


class SipHash13(SipHash):
    """SipHash-1-3, the faster variant used for hash-table keying."""

    def __init__(self, key: bytes):
        super().__init__(key, SIPHASH_1_3.c, SIPHASH_1_3.d)


def siphash24(key: bytes) -> SipHash24:
    """Convenience constructor matching hashlib-style usage."""
    return SipHash24(key)


def siphash13(key: bytes) -> SipHash13:
    return SipHash13(key)


def new(key: bytes, data: bytes = b"", algo: Optional[str] = None) -> SipHash:
    """
    Create a streaming hasher by variant name.

    Args:
        key: 16-byte key
        data: Optional initial data to feed
        algo: Variant name such as ``"siphash24"`` or ``"siphash-1-3"``;
            ``None`` uses :func:`keyedsiphash.config.default_params`

    Raises:
        ValueError: If algo is unsupported
    """
    params = resolve_params(algo)
    hasher = SipHash(key, params.c, params.d)
    if data:
        hasher.update(data)
    return hasher


__all__ = [
    "SipHash",
    "SipHash13",
    "SipHash24",
    "hash",
    "hash_formatted",
    "hash_r",
    "new",
    "siphash13",
    "siphash24",
]
