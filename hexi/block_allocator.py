"""Fixed-capacity block allocator with a LIFO free list and a fallback path."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from hexi.exceptions import HexiError


@dataclass
class _Block:
    obj: Any
    slot: Optional[int]
    thread_id: Optional[int]

    @property
    def using_new(self) -> bool:
        return self.slot is None


class BlockAllocator:
    """Hands out objects built by ``factory`` from a fixed number of slots.

    ``elements`` slots are reserved up front and kept on a LIFO free list.
    When every slot is taken, further allocations fall back to plain
    construction rather than reserving more slots. With ``validate`` set,
    an object may only be deallocated on the thread that created the
    allocator.

    The counters ``storage_active_count``, ``new_active_count``,
    ``active_count``, ``total_allocs`` and ``total_deallocs`` describe the
    allocator's activity.
    """

    def __init__(
        self,
        factory: Callable[..., Any],
        elements: int,
        validate: bool = False,
    ) -> None:
        if elements <= 0:
            raise ValueError(f"element count must be positive: {elements}")
        self.factory = factory
        self.elements = elements
        self.validate = validate
        self._thread_id = threading.get_ident() if validate else None
        self._free: List[int] = []
        self._blocks: Dict[int, _Block] = {}

        for slot in range(elements):
            self._free.append(slot)

        self.storage_active_count = 0
        self.new_active_count = 0
        self.active_count = 0
        self.total_allocs = 0
        self.total_deallocs = 0

    def allocate(self, *args: Any, **kwargs: Any) -> Any:
        """Construct an object with ``factory(*args, **kwargs)`` and track it."""
        obj = self.factory(*args, **kwargs)

        if id(obj) in self._blocks:
            raise HexiError("factory returned an object that is already allocated")

        slot = self._free.pop() if self._free else None

        if slot is None:
            self.new_active_count += 1
        else:
            self.storage_active_count += 1

        self._blocks[id(obj)] = _Block(obj, slot, self._thread_id)
        self.total_allocs += 1
        self.active_count += 1
        return obj

    def deallocate(self, obj: Any) -> None:
        """Release ``obj``, returning its slot to the free list if it had one."""
        block = self._blocks.get(id(obj))

        if block is None or block.obj is not obj:
            raise HexiError("object was not allocated by this allocator")

        if self.validate and threading.get_ident() != self._thread_id:
            raise HexiError("thread policy violation: deallocation from another thread")

        del self._blocks[id(obj)]

        if block.using_new:
            self.new_active_count -= 1
        else:
            self.storage_active_count -= 1
            self._free.append(block.slot)

        self.total_deallocs += 1
        self.active_count -= 1