"""Show hex, RGB, XYZ and LAB for each colour, or convert LAB back to RGB.

XYZ is scaled to 0-100 and LAB is relative to the D65 white point.
With --lab L a b, the LAB triple is converted to the nearest displayable
8-bit RGB colour; out-of-gamut values are clamped per channel.

Example:
    threadmatch convert '#c62828' 12,34,56
    threadmatch convert --lab 53.24 80.09 67.20
"""

from threadmatch.core.colorspace import lab_to_rgb, rgb_to_lab, rgb_to_xyz
from threadmatch.core.palette import rgb_to_hex
from threadmatch.core.types import ColourSample, Command, Report

command = Command(
    name='convert',
    help='Convert colours between hex, RGB, XYZ and LAB.',
)


def _describe(rgb) -> dict:
    return {
        'hex': rgb_to_hex(rgb),
        'rgb': list(rgb),
        'xyz': [round(v, 4) for v in rgb_to_xyz(rgb)],
        'lab': [round(v, 4) for v in rgb_to_lab(rgb)],
    }


@command.run
def run(samples: list[ColourSample], report: Report, args) -> None:
    for sample in samples:
        report.add(sample.label, 'convert', _describe(sample.rgb))

    lab = getattr(args, 'lab', None)
    if lab:
        L, a, b = (float(v) for v in lab)
        rgb = lab_to_rgb((L, a, b))
        report.add(f'LAB({L:g}, {a:g}, {b:g})', 'convert', _describe(rgb))
