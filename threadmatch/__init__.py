"""threadmatch — colour matching and palette reduction for needlework pattern design.

Map an RGB colour to the perceptually closest thread in a palette, reduce a
large set of image colours to a working palette, and score colour harmony.
"""

from threadmatch.core.colorspace import lab_to_rgb, lab_to_xyz, rgb_to_lab, rgb_to_xyz, xyz_to_lab, xyz_to_rgb
from threadmatch.core.distance import (
    color_distance,
    delta_e76,
    delta_e94,
    delta_e2000,
    euclidean_distance,
    weighted_rgb_distance,
)
from threadmatch.core.harmony import calculate_color_harmony
from threadmatch.core.matching import find_closest_color, find_closest_colors, get_color_difference_category
from threadmatch.core.reduction import reduce_color_palette
from threadmatch.core.types import LAB, RGB, XYZ, Algorithm, ColorMatch, PaletteEntry

__version__ = '0.1.0'

__all__ = [
    'LAB',
    'RGB',
    'XYZ',
    'Algorithm',
    'ColorMatch',
    'PaletteEntry',
    'calculate_color_harmony',
    'color_distance',
    'delta_e76',
    'delta_e94',
    'delta_e2000',
    'euclidean_distance',
    'find_closest_color',
    'find_closest_colors',
    'get_color_difference_category',
    'lab_to_rgb',
    'lab_to_xyz',
    'reduce_color_palette',
    'rgb_to_lab',
    'rgb_to_xyz',
    'weighted_rgb_distance',
    'xyz_to_lab',
    'xyz_to_rgb',
]
