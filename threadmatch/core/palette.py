"""Colour text helpers: hex and 'r,g,b' parsing, hex formatting."""

import re

from threadmatch.core.types import RGB

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
_TRIPLE_RE = re.compile(r'^\s*(-?\d+)\s*[, ]\s*(-?\d+)\s*[, ]\s*(-?\d+)\s*$')


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse '#rrggbb', 'rrggbb' or '#rgb'. Raises ValueError on anything else."""
    m = _HEX_RE.match(hex_str.strip())
    if not m:
        raise ValueError(f'Invalid hex colour: {hex_str!r}')
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def parse_colour(text: str) -> RGB:
    """Parse a colour given as hex or as three 0-255 integers ('12,34,56')."""
    m = _TRIPLE_RE.match(text)
    if m:
        channels = tuple(int(v) for v in m.groups())
        for v in channels:
            if not 0 <= v <= 255:
                raise ValueError(f'RGB channel out of range 0-255 in {text!r}')
        return channels  # type: ignore[return-value]
    return hex_to_rgb(text)
