from __future__ import annotations

import enum
import struct
from typing import Tuple

from .config import check_rounds
from .errors import InvalidKeyLength, InvalidState

_MASK_64 = 0xFFFFFFFFFFFFFFFF

# "somepseudorandomlygeneratedbytes"
_INIT_V0 = 0x736F6D6570736575
_INIT_V1 = 0x646F72616E646F6D
_INIT_V2 = 0x6C7967656E657261
_INIT_V3 = 0x7465646279746573

_KEY = struct.Struct("<QQ")

Words = Tuple[int, int, int, int]


def _rotl(x: int, b: int) -> int:
    """Rotate left for 64-bit values."""
    return ((x << b) | (x >> (64 - b))) & _MASK_64


def sip_round(v0: int, v1: int, v2: int, v3: int) -> Words:
    """Apply one SipRound to the four state words and return the new words."""
    v0 = (v0 + v1) & _MASK_64
    v2 = (v2 + v3) & _MASK_64
    v1 = _rotl(v1, 13)
    v3 = _rotl(v3, 16)
    v1 ^= v0
    v3 ^= v2
    v0 = _rotl(v0, 32)

    v2 = (v2 + v1) & _MASK_64
    v0 = (v0 + v3) & _MASK_64
    v1 = _rotl(v1, 17)
    v3 = _rotl(v3, 21)
    v1 ^= v2
    v3 ^= v0
    v2 = _rotl(v2, 32)

    return v0, v1, v2, v3


class Phase(enum.Enum):
    INITIALIZED = "initialized"
    ABSORBING = "absorbing"
    FINALIZED = "finalized"


class SipState:
    """
    The 256-bit SipHash state, four 64-bit words plus a lifecycle phase.

    Create one with :func:`init_state`, feed it words with :func:`absorb_block`
    and end it with :func:`finalize`. Once finalized the state is inert and every
    further operation raises :class:`InvalidState`.
    """

    __slots__ = ("_v0", "_v1", "_v2", "_v3", "_phase")

    def __init__(self, v0: int, v1: int, v2: int, v3: int):
        self._v0 = v0 & _MASK_64
        self._v1 = v1 & _MASK_64
        self._v2 = v2 & _MASK_64
        self._v3 = v3 & _MASK_64
        self._phase = Phase.INITIALIZED

    @property
    def words(self) -> Words:
        return self._v0, self._v1, self._v2, self._v3

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def finalized(self) -> bool:
        return self._phase is Phase.FINALIZED

    def copy(self) -> "SipState":
        dup = self.__class__.__new__(self.__class__)
        dup._v0, dup._v1, dup._v2, dup._v3 = self.words
        dup._phase = self._phase
        return dup

    def __repr__(self) -> str:
        words = ", ".join(f"0x{w:016x}" for w in self.words)
        return f"SipState({words}, phase={self._phase.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SipState):
            return NotImplemented
        return self.words == other.words and self._phase is other._phase

    __hash__ = None  # type: ignore[assignment]

    # Internal helpers -------------------------------------------------
    def _ensure_open(self, operation: str) -> None:
        if self._phase is Phase.FINALIZED:
            raise InvalidState(f"cannot {operation} a finalized SipState")

    def _rounds(self, n: int) -> None:
        v0, v1, v2, v3 = self.words
        for _ in range(n):
            v0, v1, v2, v3 = sip_round(v0, v1, v2, v3)
        self._v0, self._v1, self._v2, self._v3 = v0, v1, v2, v3


def key_bytes(key: bytes) -> bytes:
    """Return ``key`` as bytes after checking it is a bytes-like 16-byte key."""
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError("key must be bytes-like")
    raw = bytes(key)
    if len(raw) != 16:
        raise InvalidKeyLength(len(raw))
    return raw


def init_state(key: bytes) -> SipState:
    """
    Build the initial state for a 16-byte key.

    Raises:
        TypeError: If key is not bytes-like
        InvalidKeyLength: If key is not exactly 16 bytes
    """
    k0, k1 = _KEY.unpack(key_bytes(key))
    return SipState(_INIT_V0 ^ k0, _INIT_V1 ^ k1, _INIT_V2 ^ k0, _INIT_V3 ^ k1)


def absorb_block(state: SipState, word: int, c: int) -> SipState:
    """
    Absorb one little-endian 64-bit message word with ``c`` compression rounds.

    The state is updated in place and returned for chaining. Callers own the
    chunking and the final-block padding (see :func:`keyedsiphash.blocks.iter_blocks`).

    Raises:
        InvalidRoundCount: If c < 1
        InvalidState: If the state has been finalized
        TypeError: If word is not an int
        ValueError: If word does not fit in 64 bits
    """
    check_rounds("c", c)
    state._ensure_open("absorb into")
    if isinstance(word, bool) or not isinstance(word, int):
        raise TypeError("word must be an int")
    if not 0 <= word <= _MASK_64:
        raise ValueError(f"word must fit in 64 bits, got {word:#x}")

    state._v3 ^= word
    state._rounds(c)
    state._v0 ^= word
    state._phase = Phase.ABSORBING
    return state


def finalize(state: SipState, d: int) -> int:
    """
    Run ``d`` finalization rounds and return the 64-bit output.

    This is terminal: the state is marked finalized and cannot be used again.

    Raises:
        InvalidRoundCount: If d < 1
        InvalidState: If the state has already been finalized
    """
    check_rounds("d", d)
    state._ensure_open("finalize")
    state._v2 ^= 0xFF
    state._rounds(d)
    state._phase = Phase.FINALIZED
    return state._v0 ^ state._v1 ^ state._v2 ^ state._v3


__all__ = ["Phase", "SipState", "absorb_block", "finalize", "init_state", "key_bytes", "sip_round"]
