"""Byte-order conversion of integers and floating point values.

Values are described by a single :mod:`struct` format character, such as
``"H"`` for an unsigned 16-bit integer or ``"d"`` for a double.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]

_ARITHMETIC_FORMATS = frozenset("bBhHiIlLqQefd")


class ByteOrder(Enum):
    """Byte orders; ``NATIVE`` is an alias of the host's order."""

    BIG = "big"
    LITTLE = "little"
    NATIVE = sys.byteorder


class Conversion(Enum):
    """Direction of a conversion between native and a fixed byte order."""

    BIG_TO_NATIVE = 0
    NATIVE_TO_BIG = 1
    LITTLE_TO_NATIVE = 2
    NATIVE_TO_LITTLE = 3


def _check_format(fmt: str) -> str:
    if not isinstance(fmt, str) or len(fmt) != 1 or fmt not in _ARITHMETIC_FORMATS:
        raise ValueError(f"unsupported arithmetic format: {fmt!r}")
    return fmt


def conditional_reverse(value: Number, fmt: str, source, target) -> Number:
    """Reverse the bytes of ``value`` if ``source`` and ``target`` differ."""
    _check_format(fmt)
    if ByteOrder(source) == ByteOrder(target):
        return value
    try:
        raw = struct.pack("<" + fmt, value)
    except struct.error as exc:
        raise ValueError(f"{value!r} does not fit format {fmt!r}: {exc}") from exc
    return struct.unpack(">" + fmt, raw)[0]


def little_to_native(value: Number, fmt: str) -> Number:
    return conditional_reverse(value, fmt, ByteOrder.LITTLE, ByteOrder.NATIVE)


def big_to_native(value: Number, fmt: str) -> Number:
    return conditional_reverse(value, fmt, ByteOrder.BIG, ByteOrder.NATIVE)


def native_to_little(value: Number, fmt: str) -> Number:
    return conditional_reverse(value, fmt, ByteOrder.NATIVE, ByteOrder.LITTLE)


def native_to_big(value: Number, fmt: str) -> Number:
    return conditional_reverse(value, fmt, ByteOrder.NATIVE, ByteOrder.BIG)


_CONVERSIONS = {
    Conversion.BIG_TO_NATIVE: big_to_native,
    Conversion.NATIVE_TO_BIG: native_to_big,
    Conversion.LITTLE_TO_NATIVE: little_to_native,
    Conversion.NATIVE_TO_LITTLE: native_to_little,
}


def convert(conversion: Conversion, value: Number, fmt: str) -> Number:
    """Apply the conversion named by ``conversion``."""
    return _CONVERSIONS[Conversion(conversion)](value, fmt)


def storage_in(value: Number, fmt: str, order) -> Number:
    """Convert a native value to the representation stored in ``order``."""
    return conditional_reverse(value, fmt, ByteOrder.NATIVE, order)


def storage_out(value: Number, fmt: str, order) -> Number:
    """Convert a value stored in ``order`` back to native."""
    return conditional_reverse(value, fmt, order, ByteOrder.NATIVE)


@dataclass
class _EndianAdaptor:
    value: Number
    fmt: str

    def __post_init__(self) -> None:
        _check_format(self.fmt)


class BigEndian(_EndianAdaptor):
    """Marks a value to be stored big-endian."""

    order = ByteOrder.BIG

    def to_storage(self) -> Number:
        """The value as it is stored big-endian."""
        return native_to_big(self.value, self.fmt)

    def from_storage(self) -> Number:
        """The native value of a value stored big-endian."""
        return big_to_native(self.value, self.fmt)


class LittleEndian(_EndianAdaptor):
    """Marks a value to be stored little-endian."""

    order = ByteOrder.LITTLE

    def to_storage(self) -> Number:
        """The value as it is stored little-endian."""
        return native_to_little(self.value, self.fmt)

    def from_storage(self) -> Number:
        """The native value of a value stored little-endian."""
        return little_to_native(self.value, self.fmt)