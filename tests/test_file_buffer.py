import struct

import pytest

from hexi.exceptions import BufferUnderrun
from hexi.file_buffer import FileBuffer

TEXT = b"The quick brown fox jumped over the lazy dog."
W, X, Y, Z = 47, 49197, 2173709693, 1438110846748337907


def _reference_bytes() -> bytes:
    return struct.pack("<BHIQ", W, X, Y, Z) + TEXT + b"\x00"


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "filebuffer"
    path.write_bytes(_reference_bytes())
    return path


def test_read(data_file):
    with FileBuffer(data_file) as buffer:
        assert buffer
        w = struct.unpack("<B", buffer.read(1))[0]
        x = struct.unpack("<H", buffer.read(2))[0]
        y = struct.unpack("<I", buffer.read(4))[0]
        z = struct.unpack("<Q", buffer.read(8))[0]
        text = buffer.read(len(TEXT))
        assert buffer
    assert w == 47
    assert x == 49197
    assert y == 2173709693
    assert z == 1438110846748337907
    assert text == TEXT


def test_write(tmp_path):
    path = tmp_path / "tmp_unittest_file_buffer_write"
    with FileBuffer(path) as buffer:
        assert buffer
        buffer.write(struct.pack("<B", W))
        buffer.write(struct.pack("<H", X))
        buffer.write(struct.pack("<I", Y))
        buffer.write(struct.pack("<Q", Z))
        buffer.write(TEXT + b"\x00")
        buffer.flush()
        assert path.read_bytes() == _reference_bytes()


def test_copy(data_file):
    with FileBuffer(data_file) as buffer:
        assert buffer.copy(1)[0] == 47
        assert buffer.copy(1)[0] == 47
        assert buffer.read(1)[0] == 47
        assert buffer.copy(1)[0] == 45


def test_skip(data_file):
    with FileBuffer(data_file) as buffer:
        assert buffer.read(1)[0] == 47
        buffer.skip(1)
        assert buffer.read(1)[0] == 192
        buffer.skip(4)
        assert struct.unpack("<I", buffer.read(4))[0] == 403842803
        assert buffer


def test_initial_size(data_file):
    with FileBuffer(data_file) as buffer:
        assert buffer
        assert buffer.size() == 61
        assert not buffer.empty()


def test_read_write_interleave(tmp_path):
    path = tmp_path / "tmp_unittest_file_buffer_read_write_mix"
    with FileBuffer(path) as buffer:
        assert buffer.empty()
        for fmt, value in (("<B", 42), ("<H", 64245), ("<I", 80144), ("<Q", 1438110846748337907)):
            buffer.write(struct.pack(fmt, value))
            assert struct.unpack(fmt, buffer.read(struct.calcsize(fmt)))[0] == value
        buffer.write(struct.pack("<H", 60925))
        buffer.write(struct.pack("<H", 1352))
        assert struct.unpack("<H", buffer.read(2))[0] == 60925
        assert struct.unpack("<H", buffer.read(2))[0] == 1352
        assert buffer.empty()


def test_find_first_of(data_file):
    with FileBuffer(data_file) as buffer:
        assert buffer
        assert buffer.find_first_of(0x2F) == 0
        assert buffer.find_first_of(0x20) == 18
        assert buffer.find_first_of(0x6F) == 27
        assert buffer.find_first_of(0x6A) == 35
        assert buffer.find_first_of(0x00) == 60
        assert buffer.find_first_of(0xFF) == FileBuffer.NPOS
        assert buffer


def test_find_first_of_is_relative_to_read_position(data_file):
    with FileBuffer(data_file) as buffer:
        buffer.skip(15)
        assert buffer.find_first_of(0x20) == 3


def test_copy_past_end_raises_and_sets_error(data_file):
    with FileBuffer(data_file) as buffer:
        with pytest.raises(BufferUnderrun) as info:
            buffer.copy(62)
        assert info.value.read_size == 62
        assert info.value.buff_size == 61
        assert not buffer


def test_read_past_end_raises(tmp_path):
    path = tmp_path / "short"
    path.write_bytes(b"ab")
    with FileBuffer(path) as buffer:
        with pytest.raises(BufferUnderrun):
            buffer.read(3)
        assert not buffer
        assert buffer.find_first_of(ord("a")) == FileBuffer.NPOS


def test_cannot_write_seek(data_file):
    with FileBuffer(data_file) as buffer:
        assert buffer.can_write_seek() is False


def test_appends_to_existing_file(data_file):
    with FileBuffer(data_file) as buffer:
        buffer.write(b"xyz")
        assert buffer.size() == 64
        buffer.skip(61)
        assert buffer.read(3) == b"xyz"
        assert buffer.empty()