"""Tests for threadmatch.core.palette — hex and triple colour parsing."""

import pytest
from threadmatch.core.palette import hex_to_rgb, parse_colour, rgb_to_hex


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_kreinik_copper(self):
        assert hex_to_rgb('#b87333') == (184, 115, 51)

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == (255, 255, 255)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    @pytest.mark.parametrize('bad', ['invalid', '#ff', '#ffffffff', '', '#ggg'])
    def test_invalid_hex_raises(self, bad):
        with pytest.raises(ValueError, match='Invalid hex colour'):
            hex_to_rgb(bad)


class TestRgbToHex:
    def test_pads_channels(self):
        assert rgb_to_hex((1, 2, 3)) == '#010203'

    def test_round_trip(self):
        assert hex_to_rgb(rgb_to_hex((184, 115, 51))) == (184, 115, 51)


class TestParseColour:
    def test_comma_triple(self):
        assert parse_colour('12,34,56') == (12, 34, 56)

    def test_spaced_triple(self):
        assert parse_colour(' 12, 34, 56 ') == (12, 34, 56)

    def test_hex_passthrough(self):
        assert parse_colour('#c62828') == (198, 40, 40)

    def test_out_of_range_channel(self):
        with pytest.raises(ValueError, match='out of range'):
            parse_colour('12,300,56')

    def test_negative_channel(self):
        with pytest.raises(ValueError, match='out of range'):
            parse_colour('-1,0,0')

    def test_garbage(self):
        with pytest.raises(ValueError):
            parse_colour('red')
