from dataclasses import dataclass

from reactor_reboot.exceptions import INVALID_RANGE_ERROR_MSG, NON_INTEGER_BOUND_ERROR_MSG, InvalidRangeError
from reactor_reboot.utils import intersect_range, normalize_range, span_length

AXES = ("x", "y", "z")


@dataclass(frozen=True)
class Cuboid:
    """An axis-aligned box of unit cubes.

    Each axis is a closed integer interval, so ``Cuboid(10, 12, 10, 12, 10, 12)``
    holds 3 x 3 x 3 = 27 cubes. Instances are immutable and compare by their
    six bounds.

    The constructor rejects non-integer bounds and inverted ranges
    (``min > max``). Everything the algebra below produces is valid by
    construction, so validation only ever fires on external input.
    """

    x_min: int
    x_max: int
    y_min: int
    y_max: int
    z_min: int
    z_max: int

    def __post_init__(self):
        for axis, (lo, hi) in zip(AXES, self.ranges):
            for value in (lo, hi):
                if not isinstance(value, int) or isinstance(value, bool):
                    raise InvalidRangeError(NON_INTEGER_BOUND_ERROR_MSG.format(axis=axis, value=value))
            if lo > hi:
                raise InvalidRangeError(INVALID_RANGE_ERROR_MSG.format(axis=axis, lo=lo, hi=hi))

    @classmethod
    def from_ranges(cls, x, y, z) -> "Cuboid":
        """Build a cuboid from three axis specifications.

        Args:
            x, y, z: Each an inclusive ``(lo, hi)`` pair, a unit-step ``range``,
                     or a single coordinate (see ``normalize_range``).

        Example:
            Cuboid.from_ranges((10, 12), range(10, 13), 10) == Cuboid(10, 12, 10, 12, 10, 10)
        """
        (x_min, x_max), (y_min, y_max), (z_min, z_max) = (normalize_range(r) for r in (x, y, z))
        return cls(x_min, x_max, y_min, y_max, z_min, z_max)

    @property
    def x(self) -> tuple[int, int]:
        return self.x_min, self.x_max

    @property
    def y(self) -> tuple[int, int]:
        return self.y_min, self.y_max

    @property
    def z(self) -> tuple[int, int]:
        return self.z_min, self.z_max

    @property
    def ranges(self) -> tuple[tuple[int, int], ...]:
        return (self.x_min, self.x_max), (self.y_min, self.y_max), (self.z_min, self.z_max)

    @property
    def bounds(self) -> tuple[int, int, int, int, int, int]:
        return self.x_min, self.x_max, self.y_min, self.y_max, self.z_min, self.z_max

    def intersects(self, other: "Cuboid") -> "Cuboid | None":
        """Return the cuboid shared by ``self`` and ``other``, or None.

        Each axis is clipped independently. Boxes that merely touch along a
        face still share a one-cube-thick slab, since bounds are inclusive;
        boxes separated by any gap on any axis do not overlap at all.
        """
        overlap = []
        for a, b in zip(self.ranges, other.ranges):
            rng = intersect_range(a, b)
            if rng is None:
                return None
            overlap.append(rng)
        return Cuboid.from_ranges(*overlap)

    def overlaps(self, other: "Cuboid") -> bool:
        return (self.x_min <= other.x_max and other.x_min <= self.x_max
                and self.y_min <= other.y_max and other.y_min <= self.y_max
                and self.z_min <= other.z_max and other.z_min <= self.z_max)

    def contains(self, other: "Cuboid") -> bool:
        """True when ``other`` lies entirely inside this cuboid."""
        return all(a[0] <= b[0] and b[1] <= a[1] for a, b in zip(self.ranges, other.ranges))

    def volume(self) -> int:
        """Number of unit cubes in the cuboid."""
        sx, sy, sz = (span_length(r) for r in self.ranges)
        return sx * sy * sz

    def diff_and_split(self, other: "Cuboid") -> list["Cuboid"]:
        """Remove ``other`` from this cuboid, returning the remainder as disjoint pieces.

        The remainder is carved one axis at a time. Whatever lies below or
        above the overlap on x is cut off first, spanning the full y and z
        extent. The remaining candidate is then narrowed to the overlap's x
        span and cut below/above on y. Finally it is narrowed to the overlap's
        x and y spans and cut on z. Each slab is emitted only if it is non-empty,
        which yields at most six pieces that partition ``self - other`` exactly.

        Returns:
            ``[self]`` if the cuboids do not overlap, ``[]`` if ``other`` covers
            ``self`` entirely, otherwise the remaining slabs in x, y, z order.

        Example:
            Cuboid(10, 12, 10, 12, 10, 12).diff_and_split(Cuboid(10, 10, 10, 10, 10, 10))
            -> [Cuboid(11, 12, 10, 12, 10, 12),
                Cuboid(10, 10, 11, 12, 10, 12),
                Cuboid(10, 10, 10, 10, 11, 12)]
        """
        core = self.intersects(other)
        if core is None:
            return [self]

        pieces = []
        if core.x_min > self.x_min:
            pieces.append(Cuboid(self.x_min, core.x_min - 1, self.y_min, self.y_max, self.z_min, self.z_max))
        if core.x_max < self.x_max:
            pieces.append(Cuboid(core.x_max + 1, self.x_max, self.y_min, self.y_max, self.z_min, self.z_max))
        if core.y_min > self.y_min:
            pieces.append(Cuboid(core.x_min, core.x_max, self.y_min, core.y_min - 1, self.z_min, self.z_max))
        if core.y_max < self.y_max:
            pieces.append(Cuboid(core.x_min, core.x_max, core.y_max + 1, self.y_max, self.z_min, self.z_max))
        if core.z_min > self.z_min:
            pieces.append(Cuboid(core.x_min, core.x_max, core.y_min, core.y_max, self.z_min, core.z_min - 1))
        if core.z_max < self.z_max:
            pieces.append(Cuboid(core.x_min, core.x_max, core.y_min, core.y_max, core.z_max + 1, self.z_max))
        return pieces

    # --- Serialization helpers ---
    def to_dict(self) -> dict:
        return {axis: list(rng) for axis, rng in zip(AXES, self.ranges)}

    @classmethod
    def from_dict(cls, data: dict) -> "Cuboid":
        return cls.from_ranges(*(tuple(int(v) for v in data[axis]) for axis in AXES))

    def __str__(self) -> str:
        return ",".join(f"{axis}={lo}..{hi}" for axis, (lo, hi) in zip(AXES, self.ranges))
