"""Colour space conversions: sRGB <-> XYZ <-> CIELAB, D65 reference white.

Scalar functions work on plain tuples and are what the matcher and the
distance formulas use. ``rgb_array_to_lab`` is the same transform over an
(N, 3) numpy array, used where thousands of colours are converted at once.

Inverse conversions end in an integer clamp to [0, 255]; LAB values outside
the sRGB gamut are clamped silently.
"""

import math

import numpy as np

from threadmatch.core.types import LAB, RGB, XYZ

# D65 reference white, Y normalised to 100
REF_X = 95.047
REF_Y = 100.000
REF_Z = 108.883

EPSILON = 0.008856
KAPPA = 903.3

# Linear sRGB -> XYZ (D65)
RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ -> linear sRGB (D65)
XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)


def _srgb_to_linear(c: float) -> float:
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def _linear_to_srgb(c: float) -> float:
    return 1.055 * c ** (1.0 / 2.4) - 0.055 if c > 0.0031308 else 12.92 * c


def _lab_f(t: float) -> float:
    return t ** (1.0 / 3.0) if t > EPSILON else (KAPPA * t + 16.0) / 116.0


def _to_channel(c: float) -> int:
    """Scale an sRGB value in [0, 1] to an integer channel, rounding half up."""
    return max(0, min(255, math.floor(c * 255.0 + 0.5)))


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """Convert 8-bit sRGB to XYZ scaled to 0-100."""
    r, g, b = (_srgb_to_linear(c / 255.0) * 100.0 for c in rgb)
    m = RGB_TO_XYZ
    return (
        r * m[0][0] + g * m[0][1] + b * m[0][2],
        r * m[1][0] + g * m[1][1] + b * m[1][2],
        r * m[2][0] + g * m[2][1] + b * m[2][2],
    )


def xyz_to_lab(xyz: XYZ) -> LAB:
    fx = _lab_f(xyz[0] / REF_X)
    fy = _lab_f(xyz[1] / REF_Y)
    fz = _lab_f(xyz[2] / REF_Z)
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def rgb_to_lab(rgb: RGB) -> LAB:
    return xyz_to_lab(rgb_to_xyz(rgb))


def lab_to_xyz(lab: LAB) -> XYZ:
    """Inverse of xyz_to_lab, branch for branch."""
    l_star, a_star, b_star = lab
    fy = (l_star + 16.0) / 116.0
    fx = a_star / 500.0 + fy
    fz = fy - b_star / 200.0

    fx3 = fx * fx * fx
    fz3 = fz * fz * fz
    x = fx3 if fx3 > EPSILON else (116.0 * fx - 16.0) / KAPPA
    y = ((l_star + 16.0) / 116.0) ** 3 if l_star > KAPPA * EPSILON else l_star / KAPPA
    z = fz3 if fz3 > EPSILON else (116.0 * fz - 16.0) / KAPPA
    return (x * REF_X, y * REF_Y, z * REF_Z)


def xyz_to_rgb(xyz: XYZ) -> RGB:
    """Convert XYZ (0-100) to 8-bit sRGB, clamping each channel to [0, 255]."""
    x, y, z = (v / 100.0 for v in xyz)
    m = XYZ_TO_RGB
    r = x * m[0][0] + y * m[0][1] + z * m[0][2]
    g = x * m[1][0] + y * m[1][1] + z * m[1][2]
    b = x * m[2][0] + y * m[2][1] + z * m[2][2]
    return (
        _to_channel(_linear_to_srgb(r)),
        _to_channel(_linear_to_srgb(g)),
        _to_channel(_linear_to_srgb(b)),
    )


def lab_to_rgb(lab: LAB) -> RGB:
    return xyz_to_rgb(lab_to_xyz(lab))


def chroma(lab: LAB) -> float:
    """CIELAB chroma C* = sqrt(a*^2 + b*^2)."""
    return math.sqrt(lab[1] * lab[1] + lab[2] * lab[2])


def hue_angle(lab: LAB) -> float:
    """CIELAB hue angle in degrees, normalised to [0, 360)."""
    h = math.degrees(math.atan2(lab[2], lab[1]))
    return h if h >= 0 else h + 360.0


def rgb_array_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert an (N, 3) array of 8-bit sRGB values to an (N, 3) LAB array."""
    c = np.asarray(rgb, dtype=np.float64) / 255.0
    linear = np.where(c > 0.04045, ((c + 0.055) / 1.055) ** 2.4, c / 12.92) * 100.0

    xyz = linear @ np.array(RGB_TO_XYZ).T
    xyz /= np.array([REF_X, REF_Y, REF_Z])

    f = np.where(xyz > EPSILON, np.cbrt(xyz), (KAPPA * xyz + 16.0) / 116.0)
    L = 116.0 * f[:, 1] - 16.0
    a = 500.0 * (f[:, 0] - f[:, 1])
    b = 200.0 * (f[:, 1] - f[:, 2])
    return np.column_stack([L, a, b])
