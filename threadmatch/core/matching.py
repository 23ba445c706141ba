"""Nearest-match queries against a thread palette.

Ties are resolved by palette order: find_closest_color keeps the first entry
seen at the minimum distance, and find_closest_colors uses a stable sort.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from threadmatch.core.distance import color_distance
from threadmatch.core.types import DEFAULT_ALGORITHM, RGB, Algorithm, ColorMatch, PaletteEntry

PaletteLike = Iterable[PaletteEntry | Mapping[str, Any]]

# Upper bounds (exclusive) for each perceptual category
DIFFERENCE_CATEGORIES: list[tuple[float, str]] = [
    (1.0, 'imperceptible'),
    (2.0, 'very close'),
    (3.5, 'close'),
    (5.0, 'noticeable'),
    (10.0, 'different'),
]


def _to_match(entry: PaletteEntry, distance: float) -> ColorMatch:
    return ColorMatch(rgb=entry.rgb, color_id=entry.id, distance=distance, name=entry.name)


def find_closest_color(
    target: RGB,
    palette: PaletteLike,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
    textiles: bool = True,
) -> ColorMatch | None:
    """Return the palette entry closest to target, or None for an empty palette."""
    algorithm = Algorithm.parse(algorithm)
    best: ColorMatch | None = None
    best_distance = float('inf')

    for raw in palette:
        entry = PaletteEntry.coerce(raw)
        distance = color_distance(target, entry.rgb, algorithm, textiles=textiles)
        if distance < best_distance:
            best_distance = distance
            best = _to_match(entry, distance)

    return best


def find_closest_colors(
    target: RGB,
    palette: PaletteLike,
    count: int = 5,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
    textiles: bool = True,
) -> list[ColorMatch]:
    """Return up to ``count`` matches sorted by ascending distance."""
    if count <= 0:
        return []
    algorithm = Algorithm.parse(algorithm)
    matches = []
    for raw in palette:
        entry = PaletteEntry.coerce(raw)
        matches.append(_to_match(entry, color_distance(target, entry.rgb, algorithm, textiles=textiles)))

    matches.sort(key=lambda m: m.distance)
    return matches[:count]


def get_color_difference_category(delta_e: float) -> str:
    """Describe a Delta E value in words."""
    if delta_e == 0:
        return 'exact match'
    for bound, label in DIFFERENCE_CATEGORIES:
        if delta_e < bound:
            return label
    return 'very different'
