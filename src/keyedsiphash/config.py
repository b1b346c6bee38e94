from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidRoundCount

logger = logging.getLogger(__name__)

VARIANT_ENV_VAR = "KEYEDSIPHASH_VARIANT"

_VARIANT_RE = re.compile(r"^siphash-?(?:(\d)(\d)|(\d+)-(\d+))$")


def check_rounds(name: str, value: object) -> int:
    """Return ``value`` if it is a usable round count, else raise InvalidRoundCount."""
    # bool is an int subclass; True rounds make no sense
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidRoundCount(name, value)
    return value


@dataclass(frozen=True)
class SipParams:
    """Compression (``c``) and finalization (``d``) round counts of a SipHash variant."""

    c: int = 2
    d: int = 4

    def __post_init__(self) -> None:
        check_rounds("c", self.c)
        check_rounds("d", self.d)

    @property
    def name(self) -> str:
        return f"siphash-{self.c}-{self.d}"

    @classmethod
    def from_name(cls, name: str) -> "SipParams":
        """
        Parse a variant name such as ``siphash24``, ``SipHash-1-3`` or ``siphash-4-8``.

        Raises:
            TypeError: If name is not a str
            ValueError: If the name does not describe a SipHash variant
            InvalidRoundCount: If the name carries a zero round count
        """
        if not isinstance(name, str):
            raise TypeError(f"algorithm name must be a str, got {type(name)!r}")
        match = _VARIANT_RE.match(name.strip().lower())
        if match is None:
            raise ValueError(f"Unsupported algorithm: {name}")
        c, d = (g for g in match.groups() if g is not None)
        return cls(int(c), int(d))


SIPHASH_2_4 = SipParams(2, 4)
SIPHASH_1_3 = SipParams(1, 3)


def default_params() -> SipParams:
    """
    Resolve the default variant.

    Reads ``KEYEDSIPHASH_VARIANT`` on every call and falls back to SipHash-2-4
    when it is unset or empty.

    Raises:
        ValueError: If the environment names an unknown variant
    """
    raw = os.environ.get(VARIANT_ENV_VAR, "").strip()
    if not raw:
        return SIPHASH_2_4
    try:
        params = SipParams.from_name(raw)
    except ValueError as exc:
        raise ValueError(f"{VARIANT_ENV_VAR}={raw!r} is not a valid SipHash variant") from exc
    logger.debug("using %s from %s", params.name, VARIANT_ENV_VAR)
    return params


def resolve_params(algo: Optional[str] = None) -> SipParams:
    if algo is None:
        return default_params()
    return SipParams.from_name(algo)


__all__ = [
    "SipParams",
    "SIPHASH_2_4",
    "SIPHASH_1_3",
    "VARIANT_ENV_VAR",
    "check_rounds",
    "default_params",
    "resolve_params",
]
