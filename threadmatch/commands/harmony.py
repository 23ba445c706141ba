"""Score how well a set of colours goes together, from 0 to 1.

Pairs of hues are scored by their angular relationship in LAB:
monochromatic (<20°) 0.9, analogous (<40°) 0.8, complementary (150-180°)
0.85, triadic (110-130°) 0.75, square (80-100°) 0.7, anything else 0.5.
Near-grey colours are ignored; a set with fewer than two hued colours is
scored on lightness spread instead.

Example:
    threadmatch harmony '#c62828' '#1a4fa0' '#e8c800'
"""

from threadmatch.core.harmony import calculate_color_harmony
from threadmatch.core.palette import rgb_to_hex
from threadmatch.core.types import ColourSample, Command, Report

command = Command(
    name='harmony',
    help='Harmony score (0-1) for a set of colours.',
)


@command.run
def run(samples: list[ColourSample], report: Report, args) -> None:
    colours = [s.rgb for s in samples]
    score = calculate_color_harmony(colours)
    report.add('colours', 'harmony', {'score': round(score, 4), 'colours': [rgb_to_hex(c) for c in colours]})
