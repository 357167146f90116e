"""Seeded procedural snowflake generator.

A snowflake is built in three stages:

1. **Seeded sequence**: the seed string is hashed into the initial state of a
   Lehmer / Park-Miller generator (multiplier 16807, modulus 2**31 - 1), which
   yields a reproducible stream of floats in ``[0, 1)``.
2. **Segment synthesis**: the stream places main-branch and side-branch
   glyphs along a single 60° wedge.
3. **Symmetry rasterization**: the wedge is rotated six times by multiples of
   60° and written into a ``size × size`` character grid.

The result is a plain multi-line string.  For a fixed ``(seed, size, style)``
triple the output is byte-for-byte reproducible.

Usage Example
-------------
    from snowflakes.core.generator import generate

    print(generate("my-unique-seed", 11, "classic"))
"""

from __future__ import annotations

import math
from dataclasses import dataclass

MODULUS = 2147483647  # 2**31 - 1
MULTIPLIER = 16807

# Substituted when the seed hash is congruent to zero, which would otherwise
# pin the generator to a fixed point.
DEFAULT_STATE = 1

PALETTES: dict[str, tuple[str, ...]] = {
    "classic": ("*", "+", "-", "|", "o", ".", "x"),
    "dense": ("#", "@", "%", "&", "$", "■", "▲"),
    "minimal": (".", "o", "*", "°", "·"),
    "mixed": ("*", "+", "-", "|", "o", ".", "x", "#", "@", "%", "&", "$"),
}

STYLES: tuple[str, ...] = tuple(PALETTES)


class InvalidParameterError(ValueError):
    """Raised when ``generate`` receives an unusable size or style."""


@dataclass(frozen=True)
class Point:
    """A glyph placed at an offset from the grid center."""

    x: int
    y: int
    glyph: str


def hash_seed(seed: str) -> int:
    """Fold a seed string into a signed 32-bit integer.

    Applies ``hash = hash * 31 + code`` over the UTF-16 code units of the
    seed, wrapping to 32 bits after every step.

    Args:
        seed: Arbitrary seed string.

    Returns:
        The hash as a signed 32-bit integer.
    """
    data = seed.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        code = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


class SeededRandom:
    """Lehmer / Park-Miller minimal-standard generator seeded from a string.

    Each instance owns its state; independent instances never interfere.

    Attributes:
        state: Current internal state, always in ``[1, MODULUS)``.
    """

    def __init__(self, seed: str):
        state = abs(hash_seed(seed)) % MODULUS
        self.state = state or DEFAULT_STATE

    def next(self) -> float:
        """Advance the generator and return a float in ``[0, 1)``."""
        self.state = (self.state * MULTIPLIER) % MODULUS
        return (self.state - 1) / (MODULUS - 1)

    def choice(self, palette: tuple[str, ...]) -> str:
        """Pick a glyph using a single draw."""
        return palette[math.floor(self.next() * len(palette))]


def generate_segment(rng: SeededRandom, max_radius: int, palette: tuple[str, ...]) -> list[Point]:
    """Synthesize the points of one 60° wedge.

    Walks outward along the positive y axis.  Each step has a 70% chance of a
    main-branch glyph; beyond ``y = 2`` a placed main branch has a further 40%
    chance of sprouting a side branch one column to the left or right.

    The order of draws is part of the output contract: main-branch test, main
    glyph, side-branch test, side offset, side direction, side glyph.

    Args:
        rng: Sequence source, advanced in place.
        max_radius: Largest y offset to visit (the grid's center index).
        palette: Glyphs to draw from.

    Returns:
        Points in the order they were placed.
    """
    points: list[Point] = []

    for y in range(1, max_radius + 1):
        if rng.next() <= 0.3:
            continue
        points.append(Point(0, y, rng.choice(palette)))

        if y > 2 and rng.next() > 0.6:
            side_y = y - math.floor(rng.next() * 2) - 1
            side_x = 1 if rng.next() > 0.5 else -1
            glyph = rng.choice(palette)

            # Manhattan bound keeps side branches inside the wedge radius.
            if abs(side_x) + abs(side_y) <= max_radius:
                points.append(Point(side_x, side_y, glyph))

    return points


def rasterize(
    points: list[Point],
    size: int,
    rng: SeededRandom,
    palette: tuple[str, ...],
) -> str:
    """Replicate a wedge six times and render the grid as text.

    Coordinates are rounded with Python's ``round`` (round-half-to-even).
    Later rotations overwrite earlier ones at the same cell.  The center cell
    is filled last from one more draw of ``rng``.

    Args:
        points: Wedge points from :func:`generate_segment`.
        size: Grid side length.
        rng: Sequence source for the center glyph.
        palette: Glyphs to draw the center from.

    Returns:
        ``size`` newline-joined rows of ``size`` characters each.
    """
    grid = [[" "] * size for _ in range(size)]
    center = size // 2

    for rotation in range(6):
        angle = rotation * math.pi / 3
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        for point in points:
            gx = round(point.x * cos_a - point.y * sin_a) + center
            gy = round(point.x * sin_a + point.y * cos_a) + center
            if 0 <= gx < size and 0 <= gy < size:
                grid[gy][gx] = point.glyph

    grid[center][center] = rng.choice(palette)

    return "\n".join("".join(row) for row in grid)


def generate(seed: str, size: int, style: str = "classic") -> str:
    """Generate a snowflake pattern.

    Even sizes are rendered as given, with the center at ``size // 2``;
    callers wanting a visually centered flake should pass an odd size.

    Args:
        seed: Seed string driving all randomness.  The empty string is valid.
        size: Grid side length, at least 1.
        style: One of :data:`STYLES`.

    Returns:
        The pattern as ``size`` lines of ``size`` characters.

    Raises:
        InvalidParameterError: If ``size`` is not a positive integer or
            ``style`` is unknown.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size < 1:
        raise InvalidParameterError(f"size must be a positive integer, got {size!r}")
    if style not in PALETTES:
        raise InvalidParameterError(
            f"style must be one of: {', '.join(STYLES)}, got {style!r}"
        )

    palette = PALETTES[style]
    rng = SeededRandom(seed)
    points = generate_segment(rng, size // 2, palette)
    return rasterize(points, size, rng, palette)
