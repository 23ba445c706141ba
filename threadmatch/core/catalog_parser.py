"""JSON parser for thread catalog files.

Accepted shapes:

    [{"code": "310", "name": "Black", "rgb": [0, 0, 0], "brand": "DMC"}, ...]

    {"brand": "DMC", "threads": [{"code": "310", "name": "Black", "hex": "#000000"}, ...]}

Each thread needs code, name, a colour (rgb list or hex string) and a brand,
either on the entry or as the file-level default. category is optional.
"""

import json
import logging
from typing import Any

from threadmatch.core.palette import hex_to_rgb
from threadmatch.core.threads import ThreadBrand, ThreadColor

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """A catalog file could not be parsed."""


def parse_catalog_file(path: str) -> list[ThreadColor]:
    """Parse a catalog file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    threads = parse_catalog_string(text, source=path)
    logger.debug('loaded %d threads from %s', len(threads), path)
    return threads


def parse_catalog_string(text: str, source: str = '<string>') -> list[ThreadColor]:
    """Parse a catalog from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f'{source}: invalid JSON: {e}') from e

    default_brand = None
    if isinstance(data, dict):
        default_brand = data.get('brand')
        data = data.get('threads')
    if not isinstance(data, list):
        raise CatalogError(f'{source}: expected a list of threads or an object with a "threads" list')

    return [_parse_entry(entry, i, default_brand, source) for i, entry in enumerate(data)]


def _parse_entry(entry: Any, index: int, default_brand: str | None, source: str) -> ThreadColor:
    where = f'{source}: thread #{index}'
    if not isinstance(entry, dict):
        raise CatalogError(f'{where}: expected an object')

    try:
        code = str(entry['code'])
        name = str(entry['name'])
    except KeyError as e:
        raise CatalogError(f'{where}: missing {e.args[0]!r}') from None

    brand_name = entry.get('brand', default_brand)
    if brand_name is None:
        raise CatalogError(f'{where}: no brand given')
    try:
        brand = ThreadBrand.parse(str(brand_name))
        rgb = _parse_rgb(entry)
    except (TypeError, ValueError) as e:
        raise CatalogError(f'{where}: {e}') from None

    category = entry.get('category')
    return ThreadColor(code=code, name=name, rgb=rgb, brand=brand, category=category)


def _parse_rgb(entry: dict) -> tuple[int, int, int]:
    if 'rgb' in entry:
        rgb = entry['rgb']
        if not isinstance(rgb, list) or len(rgb) != 3:
            raise ValueError(f'rgb must be a list of 3 integers, got {rgb!r}')
        channels = tuple(int(v) for v in rgb)
        if any(not 0 <= v <= 255 for v in channels):
            raise ValueError(f'rgb channel out of range 0-255: {rgb!r}')
        return channels  # type: ignore[return-value]
    if 'hex' in entry:
        return hex_to_rgb(str(entry['hex']))
    raise ValueError('missing "rgb" or "hex"')
