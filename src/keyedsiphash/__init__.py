"""
Keyed SipHash-c-d for byte strings, with one-shot, incremental and columnar APIs.
"""

from .blocks import block_count, iter_blocks, last_block
from .config import SipParams, default_params
from .encoding import OutputStyle, decode, decode_hex, encode
from .errors import InvalidKeyLength, InvalidRoundCount, InvalidState, SipHashError
from .siphash import (
    SipHash,
    SipHash13,
    SipHash24,
    hash,
    hash_formatted,
    hash_r,
    new,
    siphash13,
    siphash24,
)
from .state import Phase, SipState, absorb_block, finalize, init_state, sip_round
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "InvalidKeyLength",
    "InvalidRoundCount",
    "InvalidState",
    "OutputStyle",
    "Phase",
    "SipHash",
    "SipHash13",
    "SipHash24",
    "SipHashError",
    "SipParams",
    "SipState",
    "absorb_block",
    "block_count",
    "decode",
    "decode_hex",
    "default_params",
    "encode",
    "finalize",
    "hash",
    "hash_arrow_array",
    "hash_formatted",
    "hash_pandas_series",
    "hash_polars_series",
    "hash_r",
    "init_state",
    "iter_blocks",
    "last_block",
    "new",
    "sip_round",
    "siphash13",
    "siphash24",
]
