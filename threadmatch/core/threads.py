"""Thread colour library: brands, thread colours, search and palette export.

The Kreinik metallic catalog is bundled. DMC and Anchor catalogs are loaded
from JSON files (see catalog_parser) and added with ThreadLibrary.extend().
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from threadmatch.core._kreinik_data import KREINIK_THREADS
from threadmatch.core.types import RGB, PaletteEntry


class ThreadBrand(str, Enum):
    DMC = 'DMC'
    ANCHOR = 'Anchor'
    KREINIK = 'Kreinik'

    @classmethod
    def parse(cls, name: str | ThreadBrand) -> ThreadBrand:
        """Case-insensitive lookup by brand name."""
        if isinstance(name, ThreadBrand):
            return name
        for brand in cls:
            if brand.value.lower() == name.strip().lower():
                return brand
        raise ValueError(f'Unknown thread brand: {name!r}. Available: {", ".join(b.value for b in cls)}')

    @property
    def display_name(self) -> str:
        return _BRAND_INFO[self][0]

    @property
    def description(self) -> str:
        return _BRAND_INFO[self][1]


_BRAND_INFO: dict[ThreadBrand, tuple[str, str]] = {
    ThreadBrand.DMC: ('DMC', 'DMC Cotton Embroidery Floss - Industry standard for cross-stitch and embroidery'),
    ThreadBrand.ANCHOR: ('Anchor Stranded', 'Anchor Stranded Cotton - Popular alternative with excellent color range'),
    ThreadBrand.KREINIK: ('Kreinik Metallics', 'Kreinik Metallic Threads - Premium metallic and specialty threads'),
}

KREINIK_TYPE_NAMES = {
    'blending-filament': 'Blending Filament',
    'braid': 'Braid',
    'ribbon': 'Ribbon',
    'cord': 'Cord',
    'japan': 'Japan Thread',
    'silk': 'Silk',
}


def kreinik_type_name(kind: str) -> str:
    return KREINIK_TYPE_NAMES.get(kind, kind)


@dataclass(frozen=True)
class ThreadColor:
    """One thread in a brand's catalog."""

    code: str
    name: str
    rgb: RGB
    brand: ThreadBrand
    category: str | None = None  # Kreinik thread type, DMC colour family, ...

    @property
    def palette_id(self) -> str:
        return f'{self.brand.value}-{self.code}'

    @property
    def label(self) -> str:
        return f'{self.brand.value} {self.code} - {self.name}'


@dataclass(frozen=True)
class ThreadLibraryInfo:
    brand: ThreadBrand
    name: str
    description: str
    color_count: int


class ThreadLibrary:
    """An ordered collection of thread colours across brands."""

    def __init__(self, threads: Iterable[ThreadColor] = ()):
        self._threads: list[ThreadColor] = list(threads)

    def __len__(self) -> int:
        return len(self._threads)

    def __iter__(self):
        return iter(self._threads)

    def extend(self, threads: Iterable[ThreadColor]) -> None:
        self._threads.extend(threads)

    def by_brand(self, brand: ThreadBrand | str) -> list[ThreadColor]:
        brand = ThreadBrand.parse(brand)
        return [t for t in self._threads if t.brand is brand]

    def for_brands(self, brands: Iterable[ThreadBrand | str]) -> list[ThreadColor]:
        result: list[ThreadColor] = []
        for brand in brands:
            result.extend(self.by_brand(brand))
        return result

    def search(self, query: str, brands: Iterable[ThreadBrand | str] | None = None) -> list[ThreadColor]:
        """Threads whose code or name contains query, ignoring case."""
        threads = self.for_brands(brands) if brands is not None else self._threads
        q = query.lower()
        return [t for t in threads if q in t.code.lower() or q in t.name.lower()]

    def get_by_code(self, code: str, brand: ThreadBrand | str) -> ThreadColor | None:
        for thread in self.by_brand(brand):
            if thread.code == code:
                return thread
        return None

    def libraries(self) -> list[ThreadLibraryInfo]:
        """One entry per brand that has at least one thread loaded."""
        infos = []
        for brand in ThreadBrand:
            count = len(self.by_brand(brand))
            if count:
                infos.append(ThreadLibraryInfo(brand, brand.display_name, brand.description, count))
        return infos


def threads_to_palette(threads: Iterable[ThreadColor]) -> list[PaletteEntry]:
    """Convert threads to palette entries for the matcher."""
    return [PaletteEntry(id=t.palette_id, rgb=t.rgb, name=t.label) for t in threads]


def kreinik_threads() -> list[ThreadColor]:
    return [
        ThreadColor(code=code, name=name, rgb=rgb, brand=ThreadBrand.KREINIK, category=kind)
        for code, name, rgb, kind in KREINIK_THREADS
    ]


def default_library() -> ThreadLibrary:
    """A library holding only the bundled catalogs."""
    return ThreadLibrary(kreinik_threads())
