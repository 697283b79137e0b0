"""Numpy-backed region storage.

Regions are kept as rows of a growable ``int64`` array
``[x_min, x_max, y_min, y_max, z_min, z_max]``. The overlap test against an
incoming cuboid is a single vectorised comparison over all live rows, so only
the handful of regions that actually intersect it are turned back into Cuboid
objects and split.
"""

import logging
from typing import Iterable, Iterator

import numpy as np

from reactor_reboot.cuboid import Cuboid
from reactor_reboot.exceptions import ValidationError
from reactor_reboot.regionstore import RegionStore

logger = logging.getLogger(__name__)


class ArrayRegionStore(RegionStore):
    """Arena-style region storage on a numpy bounds array.

    Args:
        cuboids: Optional initial regions, stored in order.
        capacity: Initial number of rows to allocate. The array doubles when
                  full; rows beyond ``len(self)`` are scratch space.

    Example:
        >>> store = ArrayRegionStore()
        >>> store.append(Cuboid(10, 12, 10, 12, 10, 12))
        >>> store.carve(Cuboid(10, 10, 10, 10, 10, 10))
        1
        >>> len(store), store.total_volume()
        (3, 26)
    """

    DEFAULT_CAPACITY = 64

    def __init__(self, cuboids: Iterable[Cuboid] = (), capacity: int = DEFAULT_CAPACITY):
        super().__init__()
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValidationError(f"capacity must be a positive integer, got {capacity}")
        self._bounds = np.empty((capacity, 6), dtype=np.int64)
        self._size = 0
        self.extend(cuboids)

    @property
    def capacity(self) -> int:
        return self._bounds.shape[0]

    def _live(self) -> np.ndarray:
        return self._bounds[:self._size]

    def _reserve(self, rows: int) -> None:
        """Grow the backing array so it can hold at least ``rows`` rows."""
        if rows <= self.capacity:
            return
        new_capacity = self.capacity
        while new_capacity < rows:
            new_capacity *= 2
        grown = np.empty((new_capacity, 6), dtype=np.int64)
        grown[:self._size] = self._live()
        self._bounds = grown
        logger.debug(f"Grew region array to {new_capacity} rows")

    @staticmethod
    def _row_to_cuboid(row: np.ndarray) -> Cuboid:
        return Cuboid(*(int(v) for v in row))

    def append(self, cuboid: Cuboid) -> None:
        self._reserve(self._size + 1)
        self._bounds[self._size] = cuboid.bounds
        self._size += 1

    def _overlap_mask(self, cuboid: Cuboid) -> np.ndarray:
        live = self._live()
        return ((live[:, 0] <= cuboid.x_max) & (live[:, 1] >= cuboid.x_min)
                & (live[:, 2] <= cuboid.y_max) & (live[:, 3] >= cuboid.y_min)
                & (live[:, 4] <= cuboid.z_max) & (live[:, 5] >= cuboid.z_min))

    def carve(self, cuboid: Cuboid) -> int:
        hits = np.flatnonzero(self._overlap_mask(cuboid))
        if hits.size == 0:
            return 0

        live = self._live()
        parts = []
        prev = 0
        for i in hits:
            parts.append(live[prev:i])
            pieces = self._row_to_cuboid(live[i]).diff_and_split(cuboid)
            if pieces:
                parts.append(np.array([p.bounds for p in pieces], dtype=np.int64))
            prev = i + 1
        parts.append(live[prev:])

        merged = np.concatenate(parts)
        self._reserve(merged.shape[0])
        self._bounds[:merged.shape[0]] = merged
        self._size = merged.shape[0]
        return int(hits.size)

    def __iter__(self) -> Iterator[Cuboid]:
        for row in self._live():
            yield self._row_to_cuboid(row)

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        self._size = 0

    def total_volume(self) -> int:
        live = self._live()
        # Python ints for the products so the total cannot wrap around
        spans = (live[:, 1::2] - live[:, 0::2] + 1).astype(object)
        return int(np.prod(spans, axis=1).sum())
