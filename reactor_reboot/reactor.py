from dataclasses import dataclass
import logging
from typing import Iterable, Optional, Union

from reactor_reboot.cuboid import Cuboid
from reactor_reboot.exceptions import ValidationError
from reactor_reboot.regionstore import RegionStore, create_region_store

# COORDINATE SYSTEM:
# Every coordinate names one unit cube. Cuboid bounds are inclusive, so the
# cuboid x=10..12 covers cubes 10, 11 and 12 on that axis.

# CONSTANTS
INITIALISATION_BOUND = 50
DEFAULT_STORE = 'memory'

# Set up logging
logger = logging.getLogger(__name__)


def initialisation_limit() -> Cuboid:
    """The initialisation procedure only considers cubes within 50 units of the origin on every axis."""
    b = INITIALISATION_BOUND
    return Cuboid(-b, b, -b, b, -b, b)


@dataclass(frozen=True)
class Instruction:
    """One reboot step: switch every cube in ``cuboid`` on or off."""

    is_on: bool
    cuboid: Cuboid

    @classmethod
    def new(cls, is_on: bool, x_min: int, x_max: int, y_min: int, y_max: int,
            z_min: int, z_max: int) -> "Instruction":
        return cls(is_on, Cuboid(x_min, x_max, y_min, y_max, z_min, z_max))

    def __str__(self) -> str:
        return f"{'on' if self.is_on else 'off'} {self.cuboid}"


def merge_instruction(instruction: Instruction, cuboids: Iterable[Cuboid]) -> list[Cuboid]:
    """Merge an instruction into a list of disjoint active cuboids.

    Every cuboid the instruction overlaps is replaced by the pieces left after
    removing the instruction's cuboid from it. If the instruction switches
    cubes on, its whole cuboid is then appended once; it cannot overlap
    anything because every overlap was just carved away.

    Args:
        instruction: The step to apply
        cuboids: Current active cuboids, pairwise disjoint

    Returns:
        A new list of pairwise-disjoint cuboids. The input is not modified.
    """
    merged = [piece for cuboid in cuboids for piece in cuboid.diff_and_split(instruction.cuboid)]
    if instruction.is_on:
        merged.append(instruction.cuboid)
    return merged


def run_all(instructions: Iterable[Instruction]) -> list[Cuboid]:
    """Fold every instruction, in order, into an initially empty active set."""
    cuboids: list[Cuboid] = []
    for instruction in instructions:
        cuboids = merge_instruction(instruction, cuboids)
    return cuboids


def total_active_volume(cuboids: Iterable[Cuboid]) -> int:
    """Count active cubes. Only valid for pairwise-disjoint cuboids."""
    return sum(c.volume() for c in cuboids)


def volume_active(instructions: Iterable[Instruction]) -> int:
    """Fold the instructions into disjoint cuboids and sum their volumes."""
    return total_active_volume(run_all(instructions))


def clip_to_limit(instruction: Instruction, limit: Cuboid) -> Optional[Instruction]:
    """Restrict an instruction to ``limit``.

    Returns:
        A copy of the instruction with its cuboid replaced by the part inside
        ``limit``, or None if the instruction lies entirely outside it.
    """
    clipped = limit.intersects(instruction.cuboid)
    if clipped is None:
        return None
    return Instruction(instruction.is_on, clipped)


def limit_instructions(instructions: Iterable[Instruction], limit: Cuboid) -> list[Instruction]:
    """Clip every instruction to ``limit``, dropping those that miss it. Order is preserved."""
    limited = []
    for instruction in instructions:
        clipped = clip_to_limit(instruction, limit)
        if clipped is not None:
            limited.append(clipped)
    return limited


def _validate_instruction(instruction) -> None:
    if not isinstance(instruction, Instruction):
        raise ValidationError(f"Expected an Instruction, got {type(instruction)}")


class Reactor:
    def __init__(self,
                 region_store: Union[RegionStore, str, None] = None,
                 limit: Optional[Cuboid] = None):
        """Initialize a Reactor with no active cubes.

        A Reactor is the stateful counterpart of ``run_all``: it applies
        instructions one at a time to a region store that holds the active
        space as pairwise-disjoint cuboids.

        Args:
            region_store: Store holding the active cuboids. Either a RegionStore
                          instance, the name of a backend ('memory' or 'array'),
                          or None for the default backend. A supplied store must
                          be empty or already hold disjoint cuboids.
            limit: Optional bounding cuboid. When set, every instruction is
                   clipped to it before being applied and instructions that miss
                   it are ignored.
        """
        if region_store is None:
            region_store = DEFAULT_STORE
        if isinstance(region_store, str):
            region_store = create_region_store(region_store)
        if not isinstance(region_store, RegionStore):
            raise ValidationError(f"region_store must be a RegionStore or backend name, got {type(region_store)}")
        if limit is not None and not isinstance(limit, Cuboid):
            raise ValidationError(f"limit must be a Cuboid, got {type(limit)}")

        self._store = region_store
        self._limit = limit
        self._applied = 0

    @property
    def store(self) -> RegionStore:
        return self._store

    @property
    def limit(self) -> Optional[Cuboid]:
        return self._limit

    @property
    def applied(self) -> int:
        """Number of instructions that reached the store."""
        return self._applied

    def apply(self, instruction: Instruction) -> int:
        """Apply one instruction to the active space.

        Args:
            instruction: Step to apply. Clipped to ``limit`` first if one is set.

        Returns:
            Number of stored cuboids that overlapped the instruction and were split.
        """
        _validate_instruction(instruction)
        if self._limit is not None:
            instruction = clip_to_limit(instruction, self._limit)
            if instruction is None:
                logger.debug("Instruction outside limit, skipping")
                return 0

        carved = self._store.carve(instruction.cuboid)
        if instruction.is_on:
            self._store.append(instruction.cuboid)
        self._applied += 1
        logger.debug(f"Applied '{instruction}': carved {carved} regions, {len(self._store)} stored")
        return carved

    def run_all(self, instructions: Iterable[Instruction]) -> int:
        """Apply every instruction in order and return the active volume."""
        for instruction in instructions:
            self.apply(instruction)
        volume = self.active_volume()
        logger.info(f"Applied {self._applied} instructions: {len(self._store)} regions, {volume} cubes active")
        return volume

    def active_volume(self) -> int:
        return self._store.total_volume()

    def regions(self) -> list[Cuboid]:
        return self._store.regions()

    def reset(self) -> None:
        """Switch every cube off."""
        self._store.clear()
        self._applied = 0

    def __len__(self) -> int:
        return len(self._store)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False  # Don't suppress any exceptions

    def __repr__(self) -> str:
        return (f"Reactor(store={type(self._store).__name__}, regions={len(self._store)}, "
                f"limit={self._limit})")
