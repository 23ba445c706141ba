"""Perceptual colour distance formulas.

Five algorithms, all commutative and zero for identical colours:

  euclidean   plain RGB Euclidean distance
  weighted    RGB Euclidean with red-mean channel weights (Riemersma)
  cie76       Euclidean distance in CIELAB
  cie94       CIE94 Delta E, textiles constants by default
  ciede2000   full CIEDE2000 Delta E (Sharma, Wu & Dalal 2005), the default

The LAB-level functions (delta_e76, delta_e94, delta_e2000) take LAB triples;
the *_rgb wrappers and color_distance take 8-bit RGB.
"""

import math

from threadmatch.core.colorspace import rgb_to_lab
from threadmatch.core.types import DEFAULT_ALGORITHM, LAB, RGB, Algorithm

_POW25_7 = 25.0**7


def euclidean_distance(c1: RGB, c2: RGB) -> float:
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]
    return math.sqrt(dr * dr + dg * dg + db * db)


def weighted_rgb_distance(c1: RGB, c2: RGB) -> float:
    """RGB distance weighted by the mean red level of the pair."""
    rmean = (c1[0] + c2[0]) / 2.0
    dr = c1[0] - c2[0]
    dg = c1[1] - c2[1]
    db = c1[2] - c2[2]

    wr = 2.0 + rmean / 256.0
    wg = 4.0
    wb = 2.0 + (255.0 - rmean) / 256.0
    return math.sqrt(wr * dr * dr + wg * dg * dg + wb * db * db)


def delta_e76(lab1: LAB, lab2: LAB) -> float:
    dl = lab1[0] - lab2[0]
    da = lab1[1] - lab2[1]
    db = lab1[2] - lab2[2]
    return math.sqrt(dl * dl + da * da + db * db)


def delta_e94(lab1: LAB, lab2: LAB, textiles: bool = True) -> float:
    """CIE94 Delta E.

    ``textiles=True`` uses kL=2, K1=0.048, K2=0.014; ``False`` uses the
    graphic-arts constants kL=1, K1=0.045, K2=0.015. SC and SH are weighted
    by the geometric mean chroma of the pair so the result is symmetric.
    """
    dl = lab1[0] - lab2[0]
    da = lab1[1] - lab2[1]
    db = lab1[2] - lab2[2]

    c1 = math.sqrt(lab1[1] * lab1[1] + lab1[2] * lab1[2])
    c2 = math.sqrt(lab2[1] * lab2[1] + lab2[2] * lab2[2])
    dc = c1 - c2

    # da^2 + db^2 - dC^2 can dip just below zero from rounding
    dh2 = da * da + db * db - dc * dc
    dh = math.sqrt(dh2) if dh2 > 0.0 else 0.0

    if textiles:
        kl, k1, k2 = 2.0, 0.048, 0.014
    else:
        kl, k1, k2 = 1.0, 0.045, 0.015

    c_ref = math.sqrt(c1 * c2)
    sl = 1.0
    sc = 1.0 + k1 * c_ref
    sh = 1.0 + k2 * c_ref

    term1 = dl / (kl * sl)
    term2 = dc / sc
    term3 = dh / sh
    return math.sqrt(term1 * term1 + term2 * term2 + term3 * term3)


def delta_e2000(lab1: LAB, lab2: LAB, kl: float = 1.0, kc: float = 1.0, kh: float = 1.0) -> float:
    """CIEDE2000 Delta E between two LAB colours.

    When either colour has zero chroma (after the G rotation) the hue
    difference is 0 and the mean hue is the plain sum h1' + h2'.
    """
    l1, a1, b1 = lab1
    l2, a2, b2 = lab2

    c1 = math.sqrt(a1 * a1 + b1 * b1)
    c2 = math.sqrt(a2 * a2 + b2 * b2)
    c_avg7 = ((c1 + c2) / 2.0) ** 7
    g = 0.5 * (1.0 - math.sqrt(c_avg7 / (c_avg7 + _POW25_7)))

    a1p = a1 * (1.0 + g)
    a2p = a2 * (1.0 + g)
    c1p = math.sqrt(a1p * a1p + b1 * b1)
    c2p = math.sqrt(a2p * a2p + b2 * b2)

    h1p = math.degrees(math.atan2(b1, a1p))
    h2p = math.degrees(math.atan2(b2, a2p))
    if h1p < 0:
        h1p += 360.0
    if h2p < 0:
        h2p += 360.0

    dlp = l2 - l1
    dcp = c2p - c1p

    degenerate = c1p * c2p == 0.0
    if degenerate:
        dhp = 0.0
    elif abs(h2p - h1p) <= 180.0:
        dhp = h2p - h1p
    elif h2p - h1p > 180.0:
        dhp = h2p - h1p - 360.0
    else:
        dhp = h2p - h1p + 360.0

    dHp = 2.0 * math.sqrt(c1p * c2p) * math.sin(math.radians(dhp) / 2.0)

    lp = (l1 + l2) / 2.0
    cp = (c1p + c2p) / 2.0

    if degenerate:
        hp = h1p + h2p
    elif abs(h1p - h2p) <= 180.0:
        hp = (h1p + h2p) / 2.0
    elif h1p + h2p < 360.0:
        hp = (h1p + h2p + 360.0) / 2.0
    else:
        hp = (h1p + h2p - 360.0) / 2.0

    t = (
        1.0
        - 0.17 * math.cos(math.radians(hp - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * hp))
        + 0.32 * math.cos(math.radians(3.0 * hp + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * hp - 63.0))
    )

    lp_50_sq = (lp - 50.0) ** 2
    sl = 1.0 + (0.015 * lp_50_sq) / math.sqrt(20.0 + lp_50_sq)
    sc = 1.0 + 0.045 * cp
    sh = 1.0 + 0.015 * cp * t

    d_theta = 30.0 * math.exp(-(((hp - 275.0) / 25.0) ** 2))
    cp7 = cp**7
    rc = 2.0 * math.sqrt(cp7 / (cp7 + _POW25_7))
    rt = -rc * math.sin(math.radians(2.0 * d_theta))

    term1 = dlp / (kl * sl)
    term2 = dcp / (kc * sc)
    term3 = dHp / (kh * sh)

    total = term1 * term1 + term2 * term2 + term3 * term3 + rt * term2 * term3
    return math.sqrt(total) if total > 0.0 else 0.0


def delta_e76_rgb(c1: RGB, c2: RGB) -> float:
    return delta_e76(rgb_to_lab(c1), rgb_to_lab(c2))


def delta_e94_rgb(c1: RGB, c2: RGB, textiles: bool = True) -> float:
    return delta_e94(rgb_to_lab(c1), rgb_to_lab(c2), textiles=textiles)


def delta_e2000_rgb(c1: RGB, c2: RGB) -> float:
    return delta_e2000(rgb_to_lab(c1), rgb_to_lab(c2))


def color_distance(
    c1: RGB,
    c2: RGB,
    algorithm: Algorithm | str = DEFAULT_ALGORITHM,
    textiles: bool = True,
) -> float:
    """Distance between two RGB colours under the named algorithm."""
    algorithm = Algorithm.parse(algorithm)
    if algorithm is Algorithm.EUCLIDEAN:
        return euclidean_distance(c1, c2)
    if algorithm is Algorithm.WEIGHTED:
        return weighted_rgb_distance(c1, c2)
    if algorithm is Algorithm.CIE76:
        return delta_e76_rgb(c1, c2)
    if algorithm is Algorithm.CIE94:
        return delta_e94_rgb(c1, c2, textiles=textiles)
    return delta_e2000_rgb(c1, c2)
