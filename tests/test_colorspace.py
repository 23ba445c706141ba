"""Tests for threadmatch.core.colorspace — RGB/XYZ/LAB conversions."""

import itertools

import numpy as np
import pytest
from threadmatch.core.colorspace import (
    chroma,
    hue_angle,
    lab_to_rgb,
    lab_to_xyz,
    rgb_array_to_lab,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
    xyz_to_rgb,
)

GRID = list(range(0, 256, 15)) + [255]


class TestRgbToLab:
    def test_white(self):
        L, a, b = rgb_to_lab((255, 255, 255))
        assert L == pytest.approx(100.0, abs=0.1)
        assert abs(a) < 0.1
        assert abs(b) < 0.1

    def test_black(self):
        L, a, b = rgb_to_lab((0, 0, 0))
        assert abs(L) < 0.1
        assert a == 0.0
        assert b == 0.0

    def test_red(self):
        L, a, b = rgb_to_lab((255, 0, 0))
        assert L == pytest.approx(53.24, abs=0.05)
        assert a == pytest.approx(80.09, abs=0.05)
        assert b == pytest.approx(67.20, abs=0.05)

    def test_grey_is_achromatic(self):
        assert chroma(rgb_to_lab((128, 128, 128))) < 0.01

    def test_white_xyz_is_d65(self):
        x, y, z = rgb_to_xyz((255, 255, 255))
        assert x == pytest.approx(95.047, abs=1e-3)
        assert y == pytest.approx(100.0, abs=1e-3)
        assert z == pytest.approx(108.883, abs=1e-3)


class TestInverse:
    def test_round_trip_within_one(self):
        for rgb in itertools.product(GRID, repeat=3):
            back = lab_to_rgb(rgb_to_lab(rgb))
            for orig, got in zip(rgb, back):
                assert abs(orig - got) <= 1, f'{rgb} -> {back}'

    def test_primaries_round_trip_exactly(self):
        for rgb in [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255), (0, 0, 0)]:
            assert lab_to_rgb(rgb_to_lab(rgb)) == rgb

    def test_xyz_round_trip(self):
        xyz = (20.0, 30.0, 40.0)
        back = lab_to_xyz(xyz_to_lab(xyz))
        assert back == pytest.approx(xyz, abs=1e-6)

    def test_dark_xyz_round_trip(self):
        # Exercises the linear branch of the CIE f() function
        xyz = (0.2, 0.3, 0.4)
        back = lab_to_xyz(xyz_to_lab(xyz))
        assert back == pytest.approx(xyz, abs=1e-6)

    def test_out_of_gamut_clamps(self):
        for lab in [(100.0, 127.0, 127.0), (50.0, -128.0, 127.0), (0.0, 100.0, -100.0)]:
            rgb = lab_to_rgb(lab)
            assert all(isinstance(c, int) and 0 <= c <= 255 for c in rgb)

    def test_negative_lightness_clamps_to_black(self):
        assert lab_to_rgb((-10.0, 0.0, 0.0)) == (0, 0, 0)

    def test_xyz_to_rgb_returns_ints(self):
        rgb = xyz_to_rgb((41.24, 21.27, 1.93))
        assert all(isinstance(c, int) for c in rgb)


class TestHue:
    def test_hue_range(self):
        for rgb in [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 0, 255)]:
            h = hue_angle(rgb_to_lab(rgb))
            assert 0.0 <= h < 360.0

    def test_blue_hue_normalised(self):
        # b* is negative for blue, so atan2 is negative before normalising
        assert hue_angle(rgb_to_lab((0, 0, 255))) > 180.0


class TestArrayConversion:
    def test_matches_scalar(self):
        colours = [(0, 0, 0), (255, 255, 255), (12, 200, 40), (5, 5, 5), (250, 128, 3)]
        batch = rgb_array_to_lab(np.array(colours))
        assert batch.shape == (5, 3)
        for row, rgb in zip(batch, colours):
            assert tuple(row) == pytest.approx(rgb_to_lab(rgb), abs=1e-9)
