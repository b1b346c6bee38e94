from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .config import resolve_params
from .siphash import hash as _siphash
from .state import key_bytes

logger = logging.getLogger(__name__)


def _as_message(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Column values must be bytes or str, got {type(value)!r}")


def _hash_values(values: Iterable[Any], key: bytes, algo: Optional[str]) -> List[Optional[int]]:
    key = key_bytes(key)
    params = resolve_params(algo)
    hashes = [
        None if val is None else _siphash(key, _as_message(val), params.c, params.d)
        for val in values
    ]
    logger.debug("hashed %d values with %s", len(hashes), params.name)
    return hashes


def hash_pandas_series(series: Any, key: bytes, algo: Optional[str] = None):
    """
    Hash a pandas Series of bytes/str into a nullable UInt64 Series.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    values = [None if pd.api.types.is_scalar(val) and pd.isna(val) else val for val in series]
    hashes = _hash_values(values, key, algo)
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="UInt64")


def hash_arrow_array(array: Any, key: bytes, algo: Optional[str] = None):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint64 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = _hash_values(arr.to_pylist(), key, algo)
    return pa.array(hashes, type=pa.uint64())


def hash_polars_series(series: Any, key: bytes, algo: Optional[str] = None):
    """
    Hash a polars Series into a UInt64 Series, keeping the series name.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = _hash_values(ser.to_list(), key, algo)
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=hashes, dtype=pl.UInt64)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
