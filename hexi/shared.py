"""Seek directions, stream states, string adaptors and varint coding."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class BufferSeek(Enum):
    """Seek directions understood by buffers."""

    ABSOLUTE = 0
    BACKWARD = 1
    FORWARD = 2


class StreamSeek(Enum):
    """Seek directions understood by streams."""

    # Seeks within the entire underlying buffer
    BUFFER_ABSOLUTE = 0
    BACKWARD = 1
    FORWARD = 2
    # Seeks only within the range written by the current stream
    STREAM_ABSOLUTE = 3


class StreamState(Enum):
    """The error state of a stream."""

    OK = 0
    READ_LIMIT_ERR = 1
    BUFF_LIMIT_ERR = 2
    BUFF_WRITE_ERR = 3
    INVALID_STREAM = 4
    USER_DEFINED_ERR = 5


@dataclass
class Raw:
    """String written as its bytes alone, with no length or terminator."""

    value: Any = ""


@dataclass
class Prefixed:
    """String or container written with a fixed-width length prefix."""

    value: Any = ""


@dataclass
class PrefixedVarint:
    """String written with a varint length prefix."""

    value: Any = ""


@dataclass
class NullTerminated:
    """String written followed by a zero byte."""

    value: Any = ""


class _ByteSource(Protocol):
    def get(self, length: int) -> bytes: ...


class _ByteSink(Protocol):
    def put(self, data: bytes) -> Any: ...


def varint_decode(stream: _ByteSource) -> int:
    """Read a little-endian base-128 varint from ``stream``.

    A short read is treated as a zero byte, which ends the value.
    """
    shift = 0
    value = 0

    while True:
        chunk = stream.get(1)
        byte = chunk[0] if chunk else 0
        value |= (byte & 0x7F) << shift
        shift += 7
        if not byte & 0x80:
            return value


def varint_encode(stream: _ByteSink, value: int) -> int:
    """Write ``value`` to ``stream`` as a varint and return the bytes written."""
    if value < 0:
        raise ValueError(f"varint value must not be negative: {value}")

    written = 0

    while value > 0x7F:
        stream.put(bytes(((value & 0x7F) | 0x80,)))
        value >>= 7
        written += 1

    stream.put(bytes((value & 0x7F,)))
    return written + 1


def generate_filled(size: int, value: int) -> bytes:
    """Return ``size`` bytes all set to ``value``."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"fill value must fit in a byte: {value}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return bytes((value,)) * size