"""Reduce a set of colours to -k representatives and match each to a thread.

Colours come from an image (--image, up to 10,000 sampled pixels) and/or
the colour arguments. Reduction runs k-means++ in LAB space; seeding is
random unless --seed or THREADMATCH_SEED is given. Each representative is
resolved to its nearest thread in the library (see `match`).

With --fail-on-delta N, any representative whose nearest thread is further
than N counts as a failure and the command exits 1.

Example:
    threadmatch reduce --image photo.png -k 12 --seed 7 --catalog dmc.json --brand dmc
    threadmatch reduce '#ff0000' '#fe0101' '#0000ff' -k 2
"""

import numpy as np
from PIL import Image

from threadmatch.commands._common import match_dict, palette_for
from threadmatch.core.matching import find_closest_color
from threadmatch.core.palette import rgb_to_hex
from threadmatch.core.reduction import reduce_color_palette
from threadmatch.core.types import ColourSample, Command, Report

command = Command(
    name='reduce',
    help='Reduce colours (or an image) to K representatives and match each to a thread.',
)

MAX_IMAGE_SAMPLES = 10000


def _image_colours(path: str, rng: np.random.Generator, n_samples: int = MAX_IMAGE_SAMPLES) -> list[tuple]:
    """Sample pixel colours from an image."""
    arr = np.array(Image.open(path).convert('RGB'))
    pixels = arr.reshape(-1, 3)
    if len(pixels) > n_samples:
        indices = rng.choice(len(pixels), n_samples, replace=False)
        pixels = pixels[indices]
    return [(int(p[0]), int(p[1]), int(p[2])) for p in pixels]


@command.run
def run(samples: list[ColourSample], report: Report, args) -> None:
    rng = np.random.default_rng(getattr(args, 'seed', None))

    colours = [s.rgb for s in samples]
    image = getattr(args, 'image', None)
    if image:
        colours.extend(_image_colours(image, rng))

    if not colours:
        raise ValueError('no colours given (pass colours or --image)')

    reduced = reduce_color_palette(colours, args.target, rng=rng)
    palette = palette_for(args)
    textiles = not getattr(args, 'graphic_arts', False)
    threshold = getattr(args, 'fail_on_delta', None)

    for i, rgb in enumerate(reduced, 1):
        label = f'colour {i}'
        match = find_closest_color(rgb, palette, args.algorithm, textiles=textiles)
        report.add(
            label,
            'reduced',
            {
                'hex': rgb_to_hex(rgb),
                'rgb': list(rgb),
                'thread': match_dict(match, args.algorithm) if match else None,
            },
        )
        if threshold is not None:
            if match is not None and match.distance <= threshold:
                report.record_pass(label)
            else:
                report.record_fail(label)
