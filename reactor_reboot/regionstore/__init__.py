"""Region storage backends for the reactor's active space.

The active space is a flat, ordered collection of pairwise-disjoint cuboids.
A region store owns that collection and performs the one mutation the fold
needs: carving a cuboid out of every stored region it overlaps.

The abstract RegionStore interface allows for different storage strategies:
- MemoryRegionStore: a plain Python list of Cuboid values (default)
- ArrayRegionStore: a growable numpy bounds array with vectorised overlap tests

Both backends keep regions in the same order, so a fold produces identical
region lists whichever store backs it.
"""

import abc
from typing import Iterable, Iterator, List

from reactor_reboot.cuboid import Cuboid
from reactor_reboot.exceptions import ValidationError


class RegionStore(abc.ABC):
    """Abstract base class for active-space storage backends.

    Implementations must preserve insertion order and must replace a carved
    region by its ``diff_and_split`` pieces in the position the region held.
    """

    @abc.abstractmethod
    def append(self, cuboid: Cuboid) -> None:
        """Add a region at the end. The caller guarantees it overlaps nothing stored."""
        raise NotImplementedError

    @abc.abstractmethod
    def carve(self, cuboid: Cuboid) -> int:
        """Remove ``cuboid`` from every stored region it overlaps.

        Returns:
            Number of stored regions that overlapped and were split.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def __iter__(self) -> Iterator[Cuboid]:
        raise NotImplementedError

    @abc.abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def clear(self) -> None:
        raise NotImplementedError

    def extend(self, cuboids: Iterable[Cuboid]) -> None:
        for cuboid in cuboids:
            self.append(cuboid)

    def total_volume(self) -> int:
        """Sum of the stored region volumes, i.e. the number of active cubes."""
        return sum(c.volume() for c in self)

    def regions(self) -> List[Cuboid]:
        return list(self)


class MemoryRegionStore(RegionStore):
    """List-backed region storage.

    This is the default store. Each carve walks the whole list once and
    rebuilds it, which is simple and fast enough for a few thousand regions.
    """
    def __init__(self, cuboids: Iterable[Cuboid] = ()):
        super().__init__()
        self._regions: List[Cuboid] = list(cuboids)

    def append(self, cuboid: Cuboid) -> None:
        self._regions.append(cuboid)

    def carve(self, cuboid: Cuboid) -> int:
        carved = 0
        remaining = []
        for region in self._regions:
            if region.overlaps(cuboid):
                carved += 1
                remaining.extend(region.diff_and_split(cuboid))
            else:
                remaining.append(region)
        self._regions = remaining
        return carved

    def __iter__(self) -> Iterator[Cuboid]:
        return iter(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def clear(self) -> None:
        self._regions = []


def create_region_store(kind: str = "memory", **kwargs) -> RegionStore:
    """Instantiate a region store by name ('memory' or 'array').

    Raises:
        ValidationError: If ``kind`` names no known backend
    """
    if kind == "memory":
        return MemoryRegionStore(**kwargs)
    if kind == "array":
        return ArrayRegionStore(**kwargs)
    raise ValidationError(f"Region store must be 'memory' or 'array', got '{kind}'")


# Imported last: the array backend subclasses RegionStore from this module
from reactor_reboot.regionstore.array_regionstore import ArrayRegionStore  # noqa: E402

REGION_STORE_KINDS = ("memory", "array")

__all__ = ["RegionStore", "MemoryRegionStore", "ArrayRegionStore", "create_region_store", "REGION_STORE_KINDS"]

