"""Brute-force reference counter on a dense boolean grid.

For a small bounding cuboid (the initialisation region is 101^3 cubes) the
active space can simply be materialised: one numpy bool per cube, each
instruction assigning True or False to a sub-block. This is independent of
the cuboid-splitting algebra and serves as a cross-check for bounded runs.
"""

import logging
from typing import Iterable

import numpy as np

from reactor_reboot.cuboid import Cuboid
from reactor_reboot.exceptions import ValidationError
from reactor_reboot.reactor import Instruction, limit_instructions

DENSE_MAX_CELLS = 2_000_000

logger = logging.getLogger(__name__)


def _grid_slices(cuboid: Cuboid, origin: Cuboid) -> tuple[slice, ...]:
    """Translate a cuboid inside ``origin`` to array slices relative to the grid corner."""
    return tuple(slice(lo - base_lo, hi - base_lo + 1)
                 for (lo, hi), (base_lo, _) in zip(cuboid.ranges, origin.ranges))


def dense_grid(instructions: Iterable[Instruction], limit: Cuboid,
               max_cells: int = DENSE_MAX_CELLS) -> np.ndarray:
    """Materialise the active cubes inside ``limit`` as a boolean array.

    Axis order of the result is (x, y, z); index 0 on each axis is ``limit``'s
    minimum coordinate.

    Raises:
        ValidationError: If ``limit`` holds more than ``max_cells`` cubes.
    """
    cells = limit.volume()
    if cells > max_cells:
        raise ValidationError(f"Dense grid of {cells} cells exceeds the limit of {max_cells}")

    grid = np.zeros(tuple(hi - lo + 1 for lo, hi in limit.ranges), dtype=bool)
    for instruction in limit_instructions(instructions, limit):
        grid[_grid_slices(instruction.cuboid, limit)] = instruction.is_on
    logger.debug(f"Filled dense grid of shape {grid.shape}")
    return grid


def dense_active_volume(instructions: Iterable[Instruction], limit: Cuboid,
                        max_cells: int = DENSE_MAX_CELLS) -> int:
    """Count active cubes inside ``limit`` by brute force."""
    return int(np.count_nonzero(dense_grid(instructions, limit, max_cells)))
