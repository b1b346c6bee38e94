from __future__ import annotations


class SipHashError(Exception):
    """Base class for every error raised by keyedsiphash."""


class InvalidKeyLength(SipHashError, ValueError):
    """The key is not exactly 16 bytes."""

    def __init__(self, length: int):
        super().__init__(f"SipHash key must be exactly 16 bytes, got {length}")
        self.length = length


class InvalidRoundCount(SipHashError, ValueError):
    """A compression or finalization round count is below one."""

    def __init__(self, name: str, value: object):
        super().__init__(f"{name} must be a positive integer, got {value!r}")
        self.name = name
        self.value = value


class InvalidState(SipHashError, RuntimeError):
    """An operation was attempted on a state that has already been finalized."""


__all__ = ["SipHashError", "InvalidKeyLength", "InvalidRoundCount", "InvalidState"]
