"""Utility functions for inclusive integer range arithmetic.

Every axis of a cuboid is a closed interval ``(lo, hi)`` with both ends
included. These helpers keep the per-axis logic in one place so the cuboid
algebra can be written as a handful of three-way loops.
"""

def normalize_range(rng: tuple[int, int] | range | int) -> tuple[int, int]:
    """Convert an axis specification to an inclusive ``(lo, hi)`` pair.

    Args:
        rng: Either a ``(lo, hi)`` pair, a unit-step ``range`` object
             (``range(lo, hi + 1)``), or a single integer coordinate.

    Returns:
        tuple: ``(lo, hi)`` with both ends included.

    Examples:
        normalize_range(5) -> (5, 5)
        normalize_range(range(-2, 3)) -> (-2, 2)
        normalize_range((10, 12)) -> (10, 12)

    Notes:
        - Does not check ``lo <= hi``; callers decide whether an empty
          range is an error or simply "no overlap".
    """
    if isinstance(rng, int):
        return rng, rng
    if isinstance(rng, range):
        assert rng.step == 1, "Only unit-step ranges describe an axis"
        return rng.start, rng.stop - 1
    lo, hi = rng
    return int(lo), int(hi)


def intersect_range(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int] | None:
    """Return the overlap of two inclusive ranges, or None if they are disjoint."""
    lo = max(a[0], b[0])
    hi = min(a[1], b[1])
    if lo > hi:
        return None
    return lo, hi


def span_length(rng: tuple[int, int]) -> int:
    """Number of integer points in an inclusive range."""
    return rng[1] - rng[0] + 1
