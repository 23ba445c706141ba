"""Shared types for threadmatch: colour aliases, Algorithm, PaletteEntry, ColorMatch, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

RGB = tuple[int, int, int]  # device colour, each channel in [0, 255]
XYZ = tuple[float, float, float]  # CIE XYZ scaled to 0-100, D65
LAB = tuple[float, float, float]  # CIELAB relative to D65


class Algorithm(str, Enum):
    """Closed set of colour distance algorithms. CIEDE2000 is the default."""

    EUCLIDEAN = 'euclidean'
    WEIGHTED = 'weighted'
    CIE76 = 'cie76'
    CIE94 = 'cie94'
    CIEDE2000 = 'ciede2000'

    @classmethod
    def parse(cls, name: str | Algorithm) -> Algorithm:
        """Look up an algorithm by its lowercase name."""
        if isinstance(name, Algorithm):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ', '.join(a.value for a in cls)
            raise ValueError(f'Unknown algorithm: {name!r}. Available: {choices}') from None


DEFAULT_ALGORITHM = Algorithm.CIEDE2000


@dataclass(frozen=True)
class PaletteEntry:
    """One swatch in a thread palette."""

    id: str  # stable reference, e.g. 'Kreinik-002'
    rgb: RGB
    name: str | None = None

    @classmethod
    def coerce(cls, entry: PaletteEntry | Mapping[str, Any]) -> PaletteEntry:
        """Accept a PaletteEntry or a mapping with id/rgb/name keys."""
        if isinstance(entry, PaletteEntry):
            return entry
        r, g, b = entry['rgb']
        return cls(id=str(entry['id']), rgb=(int(r), int(g), int(b)), name=entry.get('name'))


@dataclass(frozen=True)
class ColorMatch:
    """Result of a nearest-match query."""

    rgb: RGB
    color_id: str
    distance: float
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            'rgb': list(self.rgb),
            'colorId': self.color_id,
            'distance': self.distance,
            'name': self.name,
        }


@dataclass
class ColourSample:
    """A colour given on the command line, ready for a command to analyse."""

    label: str  # the text the user typed, or 'image[i]'
    rgb: RGB


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='match', help='Find the closest threads')

        @command.run
        def run(samples, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, samples: list[ColourSample], report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(samples, report, args)


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    command: str = ''
    algorithm: str | None = None
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, label: str, key: str, data: Any) -> None:
        """Add a result under a section label (usually one input colour)."""
        if label not in self.sections:
            self.sections[label] = {}
        self.sections[label][key] = data

    def record_pass(self, label: str) -> None:
        self.pass_count += 1

    def record_fail(self, label: str) -> None:
        self.fail_count += 1
