"""Hue-based harmony score for a set of colours, from 0 (discordant) to 1."""

from collections.abc import Sequence

from threadmatch.core.colorspace import chroma, hue_angle, rgb_to_lab
from threadmatch.core.types import RGB

ACHROMATIC_CHROMA = 0.1  # at or below this, a colour has no usable hue


def _pair_score(hue_diff: float) -> float:
    """Score a minimal hue difference in degrees."""
    if hue_diff < 20:
        return 0.9  # monochromatic
    if hue_diff < 40:
        return 0.8  # analogous
    if 150 < hue_diff < 180:
        return 0.85  # complementary
    if 110 < hue_diff < 130:
        return 0.75  # triadic
    if 80 < hue_diff < 100:
        return 0.7  # square
    return 0.5


def _lightness_harmony(lightness: list[float]) -> float:
    mean = sum(lightness) / len(lightness)
    variance = sum((v - mean) ** 2 for v in lightness) / len(lightness)
    return max(0.0, 1.0 - variance / 2500.0)


def calculate_color_harmony(colors: Sequence[RGB]) -> float:
    """Mean pairwise hue-relationship score of the chromatic colours.

    Sets of fewer than two distinct colours score 1. When fewer than two
    colours carry a hue, the score falls back to lightness spread.
    """
    if len({tuple(c) for c in colors}) < 2:
        return 1.0

    labs = [rgb_to_lab(c) for c in colors]
    hues = [hue_angle(lab) for lab in labs if chroma(lab) > ACHROMATIC_CHROMA]

    if len(hues) < 2:
        return _lightness_harmony([lab[0] for lab in labs])

    total = 0.0
    comparisons = 0
    for i in range(len(hues)):
        for j in range(i + 1, len(hues)):
            diff = abs(hues[i] - hues[j])
            total += _pair_score(min(diff, 360.0 - diff))
            comparisons += 1

    return total / comparisons
