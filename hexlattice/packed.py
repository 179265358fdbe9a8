"""Packed numpy representation of coordinates.

``HEX_DTYPE`` lays out ``q`` then ``r`` as little-endian int32 with no
padding (8 bytes per coordinate); ``CUBIC_HEX_DTYPE`` appends ``s`` (12
bytes).  These layouts are the byte-level contract for buffers shared with
foreign code or GPUs.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .coords import Hex

HEX_DTYPE = np.dtype([("q", "<i4"), ("r", "<i4")])
CUBIC_HEX_DTYPE = np.dtype([("q", "<i4"), ("r", "<i4"), ("s", "<i4")])

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MASK = 0xFFFFFFFF


def _check_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError(f"component {value} does not fit in int32")
    return value


def pack(coords: Iterable[Hex], *, cubic: bool = False) -> np.ndarray:
    """Structured array of ``coords`` using ``HEX_DTYPE`` or ``CUBIC_HEX_DTYPE``."""

    if cubic:
        rows = [
            (_check_i32(h.q), _check_i32(h.r), _check_i32(h.s)) for h in coords
        ]
        return np.array(rows, dtype=CUBIC_HEX_DTYPE)
    rows = [(_check_i32(h.q), _check_i32(h.r)) for h in coords]
    return np.array(rows, dtype=HEX_DTYPE)


def unpack(array: np.ndarray) -> list[Hex]:
    if array.dtype not in (HEX_DTYPE, CUBIC_HEX_DTYPE):
        raise ValueError(f"unsupported dtype {array.dtype}")
    return [Hex(int(q), int(r)) for q, r in zip(array["q"], array["r"])]


def to_bytes(coords: Iterable[Hex], *, cubic: bool = False) -> bytes:
    return pack(coords, cubic=cubic).tobytes()


def from_bytes(data: bytes, *, cubic: bool = False) -> list[Hex]:
    dtype = CUBIC_HEX_DTYPE if cubic else HEX_DTYPE
    if len(data) % dtype.itemsize:
        raise ValueError(
            f"buffer length {len(data)} is not a multiple of {dtype.itemsize}"
        )
    return unpack(np.frombuffer(data, dtype=dtype))


def as_u64(coord: Hex) -> int:
    """64-bit key with ``q`` in the high and ``r`` in the low 32 bits."""

    q = _check_i32(coord.q) & _U32_MASK
    r = _check_i32(coord.r) & _U32_MASK
    return (q << 32) | r


def from_u64(value: int) -> Hex:
    if not 0 <= value <= 0xFFFFFFFFFFFFFFFF:
        raise OverflowError(f"{value} does not fit in uint64")
    q = (value >> 32) & _U32_MASK
    r = value & _U32_MASK
    if q > _I32_MAX:
        q -= 2**32
    if r > _I32_MAX:
        r -= 2**32
    return Hex(q, r)


__all__ = [
    "CUBIC_HEX_DTYPE",
    "HEX_DTYPE",
    "as_u64",
    "from_bytes",
    "from_u64",
    "pack",
    "to_bytes",
    "unpack",
]
