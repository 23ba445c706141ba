"""Helpers shared by command modules: thread library assembly and result dicts."""

from typing import Any

from threadmatch.core.catalog_parser import parse_catalog_file
from threadmatch.core.matching import get_color_difference_category
from threadmatch.core.palette import rgb_to_hex
from threadmatch.core.threads import ThreadColor, ThreadLibrary, default_library, threads_to_palette
from threadmatch.core.types import Algorithm, ColorMatch, PaletteEntry

PERCEPTUAL = {Algorithm.CIE76, Algorithm.CIE94, Algorithm.CIEDE2000}


def build_library(args: Any) -> ThreadLibrary:
    """Bundled threads plus every --catalog / THREADMATCH_CATALOG file."""
    library = default_library()
    for path in getattr(args, 'catalog', None) or []:
        library.extend(parse_catalog_file(path))
    return library


def palette_for(args: Any) -> list[PaletteEntry]:
    """Palette entries for the brands selected with --brand (all brands if none)."""
    library = build_library(args)
    brands = getattr(args, 'brand', None)
    threads = library.for_brands(brands) if brands else list(library)
    return threads_to_palette(threads)


def category_for(distance: float, algorithm: Algorithm) -> str | None:
    """Difference category, only meaningful for Delta E algorithms."""
    if algorithm in PERCEPTUAL:
        return get_color_difference_category(distance)
    return None


def match_dict(match: ColorMatch, algorithm: Algorithm) -> dict[str, Any]:
    data = match.to_dict()
    data['hex'] = rgb_to_hex(match.rgb)
    data['distance'] = round(match.distance, 4)
    data['category'] = category_for(match.distance, algorithm)
    return data


def thread_dict(thread: ThreadColor) -> dict[str, Any]:
    return {
        'brand': thread.brand.value,
        'code': thread.code,
        'name': thread.name,
        'hex': rgb_to_hex(thread.rgb),
        'rgb': list(thread.rgb),
        'category': thread.category,
    }
