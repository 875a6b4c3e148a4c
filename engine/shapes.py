"""
Geometric transforms for polyomino shapes.

A shape is a tuple of (x, y) offsets. All transforms are pure and return new
tuples; the input is never modified.
"""

from typing import Iterable, List, Tuple

Coordinate = Tuple[int, int]
Shape = Tuple[Coordinate, ...]

# Four quarter turns, each with and without a horizontal mirror.
ORIENTATION_COUNT = 8


def rotate90(shape: Iterable[Coordinate]) -> Shape:
    """Rotate one quarter turn clockwise about the origin: (x, y) -> (y, -x)."""
    return tuple((y, -x) for x, y in shape)


def mirror_horizontal(shape: Iterable[Coordinate]) -> Shape:
    """Mirror across the vertical axis: (x, y) -> (-x, y)."""
    return tuple((-x, y) for x, y in shape)


def mirror_vertical(shape: Iterable[Coordinate]) -> Shape:
    """Mirror across the horizontal axis: (x, y) -> (x, -y)."""
    return tuple((x, -y) for x, y in shape)


def normalize(shape: Iterable[Coordinate]) -> Shape:
    """
    Translate a shape so that its minimum x and minimum y are both 0.

    Coordinate order is preserved. An empty shape normalizes to itself.
    """
    shape = tuple(shape)
    if not shape:
        return shape

    min_x = min(x for x, _ in shape)
    min_y = min(y for _, y in shape)
    return tuple((x - min_x, y - min_y) for x, y in shape)


def canonical_key(shape: Iterable[Coordinate]) -> Shape:
    """Order-independent key for comparing shapes up to translation."""
    return tuple(sorted(normalize(shape)))


def bounding_size(shape: Iterable[Coordinate]) -> Tuple[int, int]:
    """Return (width, height) of the shape's bounding box."""
    shape = tuple(shape)
    if not shape:
        return 0, 0
    xs = [x for x, _ in shape]
    ys = [y for _, y in shape]
    return max(xs) - min(xs) + 1, max(ys) - min(ys) + 1


def orientations(shape: Iterable[Coordinate]) -> List[Shape]:
    """
    Enumerate the 8 rotate/mirror variants of a shape, each normalized.

    Index k (0-3) is k quarter turns; index 4 + k is the horizontal mirror
    followed by k quarter turns. Symmetric pieces yield repeated shapes.
    """
    variants = []
    for base in (normalize(shape), normalize(mirror_horizontal(shape))):
        current = base
        for _ in range(4):
            variants.append(current)
            current = normalize(rotate90(current))
    return variants


def unique_orientations(shape: Iterable[Coordinate]) -> List[Tuple[int, Shape]]:
    """Return (orientation index, shape) for the first occurrence of each distinct variant."""
    seen = set()
    unique = []
    for index, variant in enumerate(orientations(shape)):
        key = canonical_key(variant)
        if key in seen:
            continue
        seen.add(key)
        unique.append((index, variant))
    return unique
