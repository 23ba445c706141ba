"""Tests for threadmatch.core.matching — nearest-match queries and categories."""

import pytest
from threadmatch.core.matching import find_closest_color, find_closest_colors, get_color_difference_category
from threadmatch.core.types import Algorithm, ColorMatch, PaletteEntry

BLACK_WHITE = [
    {'id': 'w', 'rgb': [255, 255, 255]},
    {'id': 'b', 'rgb': [0, 0, 0]},
]

FIVE = [
    PaletteEntry('red', (255, 0, 0), 'Red'),
    PaletteEntry('green', (0, 255, 0), 'Green'),
    PaletteEntry('blue', (0, 0, 255), 'Blue'),
    PaletteEntry('dark-red', (139, 0, 0), 'Dark Red'),
    PaletteEntry('white', (255, 255, 255), 'White'),
]


class TestFindClosestColor:
    @pytest.mark.parametrize('algorithm', list(Algorithm))
    def test_near_black_matches_black(self, algorithm):
        match = find_closest_color((10, 10, 10), BLACK_WHITE, algorithm)
        assert match is not None
        assert match.color_id == 'b'
        assert match.rgb == (0, 0, 0)

    def test_empty_palette_returns_none(self):
        assert find_closest_color((10, 10, 10), []) is None

    def test_exact_match_distance_zero(self):
        match = find_closest_color((0, 0, 255), FIVE)
        assert match == ColorMatch(rgb=(0, 0, 255), color_id='blue', distance=0.0, name='Blue')

    def test_tie_keeps_first_entry(self):
        palette = [PaletteEntry('first', (100, 100, 100)), PaletteEntry('second', (100, 100, 100))]
        assert find_closest_color((90, 90, 90), palette).color_id == 'first'

    def test_name_optional(self):
        match = find_closest_color((0, 0, 0), BLACK_WHITE)
        assert match.name is None

    def test_accepts_generator(self):
        match = find_closest_color((250, 10, 10), (e for e in FIVE))
        assert match.color_id == 'red'


class TestFindClosestColors:
    def test_count_two_of_five(self):
        matches = find_closest_colors((200, 10, 10), FIVE, count=2)
        assert len(matches) == 2
        assert matches[0].distance <= matches[1].distance
        assert {m.color_id for m in matches} == {'red', 'dark-red'}

    def test_sorted_ascending(self):
        matches = find_closest_colors((120, 120, 120), FIVE, count=5, algorithm=Algorithm.CIE76)
        distances = [m.distance for m in matches]
        assert distances == sorted(distances)

    def test_default_count_is_five(self):
        palette = FIVE + [PaletteEntry('black', (0, 0, 0))]
        assert len(find_closest_colors((1, 2, 3), palette)) == 5

    def test_count_larger_than_palette(self):
        assert len(find_closest_colors((1, 2, 3), FIVE, count=50)) == 5

    def test_count_zero(self):
        assert find_closest_colors((1, 2, 3), FIVE, count=0) == []

    def test_ties_preserve_palette_order(self):
        palette = [
            PaletteEntry('a', (10, 10, 10)),
            PaletteEntry('far', (255, 255, 255)),
            PaletteEntry('b', (10, 10, 10)),
        ]
        matches = find_closest_colors((12, 12, 12), palette, count=3)
        assert [m.color_id for m in matches] == ['a', 'b', 'far']

    def test_empty_palette(self):
        assert find_closest_colors((1, 2, 3), []) == []


class TestDifferenceCategory:
    @pytest.mark.parametrize(
        ('delta_e', 'label'),
        [
            (0, 'exact match'),
            (0.0, 'exact match'),
            (0.5, 'imperceptible'),
            (0.99, 'imperceptible'),
            (1.0, 'very close'),
            (1.5, 'very close'),
            (2.0, 'close'),
            (3.49, 'close'),
            (3.5, 'noticeable'),
            (4.99, 'noticeable'),
            (5.0, 'different'),
            (9.99, 'different'),
            (10.0, 'very different'),
            (100, 'very different'),
        ],
    )
    def test_thresholds(self, delta_e, label):
        assert get_color_difference_category(delta_e) == label
