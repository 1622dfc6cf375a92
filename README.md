# hexi

Small building blocks for reading and writing binary data.

## Modules

- `hexi.exceptions`: `HexiError` (a `RuntimeError`) and its subclasses
  `BufferUnderrun` (`read_size`, `total_read`, `buff_size`),
  `BufferOverflow` (`write_size`, `total_write`, `free`) and
  `StreamReadLimit` (`read_size`, `total_read`, `read_limit`).
- `hexi.shared`: the enumerations `BufferSeek`, `StreamSeek` and
  `StreamState`; the string wrappers `Raw`, `Prefixed`, `PrefixedVarint` and
  `NullTerminated`; `varint_encode(stream, value)`, which writes a base-128
  varint through `stream.put(bytes)` and returns the number of bytes written;
  `varint_decode(stream)`, which reads one through `stream.get(1)`; and
  `generate_filled(size, value)`, which returns `size` copies of one byte.
- `hexi.endian`: byte-order conversion of integers and floats. A value's
  type is named by one `struct` format character (`"H"`, `"I"`, `"q"`,
  `"f"`, `"d"` and so on). It provides `conditional_reverse`,
  `little_to_native`, `big_to_native`, `native_to_little`, `native_to_big`,
  `convert` with a `Conversion` member, and `storage_in` / `storage_out`
  with a `ByteOrder`. The `BigEndian` and `LittleEndian` wrappers hold a
  value and its format, and offer `to_storage()` and `from_storage()`.
- `hexi.file_buffer`: `FileBuffer(path)` opens a file for reading and
  appending. Reads start at the beginning of the file and writes go to its
  end. It provides `read`, `copy`, `skip`, `write`, `size`, `empty`,
  `find_first_of` (which returns `FileBuffer.NPOS`, that is -1, when
  nothing matches), `flush` and `close`. It is also a context manager. A
  failed operation puts the buffer into an error state: the buffer then
  tests false, and later reads and writes raise `HexiError`.
- `hexi.intrusive_storage`: `IntrusiveStorage(block_size)` is a fixed-size
  block with separate read and write offsets. `write`, `read`, `skip` and
  `advance_write` are capped at what the block can hold, and return what they
  actually handled. Its `node` is an `IntrusiveNode` with `next` and `prev`
  links.
- `hexi.block_allocator`: `BlockAllocator(factory, elements, validate=False)`
  builds objects with `factory` and tracks them in `elements` slots, which
  are kept on a LIFO free list. Once every slot is taken, later allocations
  are still made, but outside the slots. With `validate` set, an object may
  only be deallocated on the thread that created the allocator. Its counters
  are `storage_active_count`, `new_active_count`, `active_count`,
  `total_allocs` and `total_deallocs`.
- `hexi.pmc_buffer`: the abstract interfaces `BufferBase` and `BufferRead`,
  and `BufferReadAdaptor(buffer, init_empty=False)`, a read cursor over a
  bytes-like container.

## Installation

```
pip install .
```

## Examples

```python
from hexi.intrusive_storage import IntrusiveStorage

block = IntrusiveStorage(16)
block.write(b"hello")
assert block.size() == 5
assert block.read(5) == b"hello"
```

```python
from hexi.endian import BigEndian, big_to_native

stored = BigEndian(0x1234, "H").to_storage()
assert big_to_native(stored, "H") == 0x1234
```

```python
from hexi.file_buffer import FileBuffer

# A new file: reading starts at its first byte.
with FileBuffer("new_data.bin") as buffer:
    buffer.write(b"\x2f\x00")
    buffer.flush()
    assert buffer.read(1) == b"\x2f"
    assert buffer.find_first_of(0x00) == 0
```

A read past the data that is there raises `BufferUnderrun`:

```python
from hexi.exceptions import BufferUnderrun
from hexi.pmc_buffer import BufferReadAdaptor

adaptor = BufferReadAdaptor(bytearray(b"\x01\x02"))
try:
    adaptor.read(3)
except BufferUnderrun as err:
    print(err.read_size, err.buff_size)  # 3 2
```

## What the package does not do

The package has no stream type that serialises values into buffers. The
string wrappers in `hexi.shared`, and the `StreamState` and `StreamSeek`
enumerations, are defined there, but nothing in the package uses them.
`BufferReadAdaptor` only reads. There is no matching write adaptor and no
growable buffer.

## Tests

```
pip install ".[test]"
pytest
```