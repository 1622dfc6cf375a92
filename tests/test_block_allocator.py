import threading

import pytest

from hexi.block_allocator import BlockAllocator
from hexi.exceptions import HexiError


class Chunk:
    def __init__(self, value=0):
        self.value = value


def test_single_alloc():
    alloc = BlockAllocator(Chunk, 1)
    mem = alloc.allocate()
    assert alloc.storage_active_count == 1
    assert alloc.new_active_count == 0
    assert alloc.total_allocs == 1
    assert alloc.total_deallocs == 0
    alloc.deallocate(mem)
    assert alloc.storage_active_count == 0
    assert alloc.new_active_count == 0
    assert alloc.total_allocs == 1
    assert alloc.total_deallocs == 1


@pytest.mark.parametrize("allocs", [0, 1, 37, 99])
def test_many_allocs(allocs):
    alloc = BlockAllocator(Chunk, 100)
    chunks = [alloc.allocate(i) for i in range(allocs)]

    assert alloc.total_allocs == allocs
    assert alloc.active_count == allocs
    assert alloc.total_deallocs == 0
    assert [c.value for c in chunks] == list(range(allocs))

    for chunk in chunks:
        alloc.deallocate(chunk)

    assert alloc.total_allocs == allocs
    assert alloc.active_count == 0
    assert alloc.total_deallocs == allocs


def test_over_capacity():
    alloc = BlockAllocator(Chunk, 1)
    first = alloc.allocate()
    second = alloc.allocate()
    assert alloc.storage_active_count == 1
    assert alloc.new_active_count == 1
    assert alloc.total_allocs == 2
    assert alloc.total_deallocs == 0
    alloc.deallocate(first)
    assert alloc.storage_active_count == 0
    assert alloc.new_active_count == 1
    assert alloc.total_allocs == 2
    assert alloc.total_deallocs == 1
    alloc.deallocate(second)
    assert alloc.storage_active_count == 0
    assert alloc.new_active_count == 0
    assert alloc.total_allocs == 2
    assert alloc.total_deallocs == 2


def test_slot_reused_after_release():
    alloc = BlockAllocator(Chunk, 1)
    first = alloc.allocate()
    alloc.deallocate(first)
    alloc.allocate()
    assert alloc.storage_active_count == 1
    assert alloc.new_active_count == 0


def test_no_sharing_between_allocators():
    alloc = BlockAllocator(Chunk, 2)
    chunk = alloc.allocate()
    results = {}

    def worker():
        other = BlockAllocator(Chunk, 2)
        results["before"] = (other.total_allocs, other.storage_active_count)
        item = other.allocate()
        results["during"] = (other.storage_active_count, other.total_allocs)
        other.deallocate(item)
        results["after"] = other.total_deallocs

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert results == {"before": (0, 0), "during": (1, 1), "after": 1}
    alloc.deallocate(chunk)
    assert alloc.total_deallocs == 1


def test_thread_mismatch():
    alloc = BlockAllocator(Chunk, 1, validate=True)
    chunk = alloc.allocate()
    errors = []

    def worker():
        try:
            alloc.deallocate(chunk)
        except HexiError as exc:
            errors.append(exc)

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert len(errors) == 1
    alloc.deallocate(chunk)
    assert alloc.active_count == 0


def test_deallocate_unknown_object():
    alloc = BlockAllocator(Chunk, 1)
    with pytest.raises(HexiError):
        alloc.deallocate(Chunk())


def test_double_deallocate():
    alloc = BlockAllocator(Chunk, 1)
    chunk = alloc.allocate()
    alloc.deallocate(chunk)
    with pytest.raises(HexiError):
        alloc.deallocate(chunk)


def test_zero_elements_rejected():
    with pytest.raises(ValueError):
        BlockAllocator(Chunk, 0)