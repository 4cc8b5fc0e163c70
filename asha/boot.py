"""Reading the firmware memory map handed over at boot."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, Iterable

PAGE_SIZE = 4096
CONVENTIONAL_MEMORY = 7

_LAYOUT = struct.Struct("<I4xQQQQ")


@dataclass(frozen=True)
class MemoryDescriptor:
    """One entry of the memory map."""

    SIZE: ClassVar[int] = _LAYOUT.size

    type: int
    physical_start: int
    virtual_start: int
    number_of_pages: int
    attribute: int

    def to_bytes(self) -> bytes:
        """The entry in its in-memory layout, without trailing padding."""
        return _LAYOUT.pack(
            self.type,
            self.physical_start,
            self.virtual_start,
            self.number_of_pages,
            self.attribute,
        )


def parse_memory_map(data: bytes, entry_count: int, entry_size: int) -> list[MemoryDescriptor]:
    """Decode ``entry_count`` descriptors laid out ``entry_size`` bytes apart."""
    if entry_size < MemoryDescriptor.SIZE:
        raise ValueError(
            f"entry size {entry_size} is smaller than a descriptor ({MemoryDescriptor.SIZE})"
        )
    needed = (entry_count - 1) * entry_size + MemoryDescriptor.SIZE if entry_count else 0
    if len(data) < needed:
        raise ValueError(f"memory map needs {needed} bytes, got {len(data)}")
    return [
        MemoryDescriptor(*_LAYOUT.unpack_from(data, i * entry_size))
        for i in range(entry_count)
    ]


def find_free_region(descriptors: Iterable[MemoryDescriptor]) -> tuple[int, int]:
    """Start address and size of the largest block of conventional memory.

    Returns ``(0, 0)`` when there is none; the first of equal blocks wins.
    """
    start, size = 0, 0
    for desc in descriptors:
        if desc.type != CONVENTIONAL_MEMORY:
            continue
        region_size = desc.number_of_pages * PAGE_SIZE
        if region_size > size:
            start, size = desc.physical_start, region_size
    return start, size