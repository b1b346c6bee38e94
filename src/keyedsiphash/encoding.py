from __future__ import annotations

import enum
import string
import struct
from typing import Union

_MASK_64 = 0xFFFFFFFFFFFFFFFF
_WORD = struct.Struct("<Q")
_HEXDIGITS = frozenset(string.hexdigits)


class OutputStyle(enum.Enum):
    """The fixed set of printable forms a 64-bit hash can be rendered in."""

    LOWER_HEX = "hex"
    UPPER_HEX = "HEX"
    RAW = "raw"


Encoded = Union[str, bytes]


def _style(style: Union[OutputStyle, str]) -> OutputStyle:
    if isinstance(style, OutputStyle):
        return style
    try:
        return OutputStyle(style)
    except ValueError:
        choices = ", ".join(repr(s.value) for s in OutputStyle)
        raise ValueError(f"Unsupported output style {style!r}, expected one of {choices}") from None


def encode(value: int, style: Union[OutputStyle, str] = OutputStyle.LOWER_HEX) -> Encoded:
    """
    Render a 64-bit hash value.

    Hex styles are always 16 characters, zero-padded, most significant nibble
    first. ``RAW`` is the 8-byte little-endian form, the same bytes hashlib-style
    ``digest()`` returns.

    Args:
        value: Unsigned 64-bit integer
        style: An OutputStyle or its value (``"hex"``, ``"HEX"``, ``"raw"``)

    Returns:
        ``str`` for the hex styles, ``bytes`` for ``RAW``

    Raises:
        ValueError: If value is out of range or style is unknown
    """
    style = _style(style)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an int")
    if not 0 <= value <= _MASK_64:
        raise ValueError(f"value must fit in 64 bits, got {value}")
    if style is OutputStyle.RAW:
        return _WORD.pack(value)
    if style is OutputStyle.UPPER_HEX:
        return f"{value:016X}"
    return f"{value:016x}"


def decode_hex(text: str) -> int:
    """Parse a 16-character hex digest (either case) back into its integer value."""
    if len(text) != 16 or not _HEXDIGITS.issuperset(text):
        raise ValueError(f"expected 16 hex characters, got {text!r}")
    return int(text, 16)


def decode(encoded: Encoded, style: Union[OutputStyle, str] = OutputStyle.LOWER_HEX) -> int:
    style = _style(style)
    if style is OutputStyle.RAW:
        if not isinstance(encoded, (bytes, bytearray, memoryview)) or len(encoded) != 8:
            raise ValueError("raw digests must be exactly 8 bytes")
        return _WORD.unpack(bytes(encoded))[0]
    if not isinstance(encoded, str):
        raise TypeError("hex digests must be str")
    return decode_hex(encoded)


__all__ = ["OutputStyle", "decode", "decode_hex", "encode"]
