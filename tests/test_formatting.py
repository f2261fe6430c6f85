"""Tests for readout formats and gauge math."""

import numpy as np
import pytest

from cockpit.instruments.formatting import (
    clamp01,
    format_altitude,
    format_geographic,
    format_heading,
    format_percent,
    format_pitch,
    format_roll,
    format_signed,
    format_speed,
    format_vertical_speed,
    format_world_position,
    inverse_lerp,
    lerp,
    vsi_fill,
)


class TestSignedFormat:
    """Test the signed one-decimal readout."""

    @pytest.mark.parametrize("value,expected", [
        (5.2, "+5.2"),
        (-10.34, "-10.3"),
        (3.5, "+3.5"),
        (0.0, "0.0"),
        (-0.0, "0.0"),
        (0.04, "0.0"),
        (-0.04, "0.0"),
        (0.06, "+0.1"),
        (-179.96, "-180.0"),
        (7, "+7.0"),
    ])
    def test_format_signed(self, value, expected):
        assert format_signed(value) == expected

    def test_labelled_readouts(self):
        assert format_pitch(5.2) == "PITCH +5.2"
        assert format_roll(-10.3) == "ROLL -10.3"
        assert format_vertical_speed(3.5) == "VS +3.5"
        assert format_pitch(0.0) == "PITCH 0.0"


class TestTextFormats:
    """Test the fixed readout formats."""

    @pytest.mark.parametrize("heading,expected", [
        (45.4, "HDG 045"),
        (0.0, "HDG 000"),
        (7.0, "HDG 007"),
        (359.4, "HDG 359"),
        (359.6, "HDG 000"),
        (180.0, "HDG 180"),
    ])
    def test_format_heading(self, heading, expected):
        assert format_heading(heading) == expected

    def test_format_speed_rounds_to_integer(self):
        assert format_speed(61.73 * 1.943844) == "SPD 120 kt"
        assert format_speed(0.0) == "SPD 0 kt"

    def test_format_altitude(self):
        assert format_altitude(1500.0) == "ALT 1500 m"
        assert format_altitude(1499.7) == "ALT 1500 m"

    def test_format_percent(self):
        assert format_percent(0.75) == "75%"
        assert format_percent(1.0) == "100%"
        assert format_percent(0.0) == "0%"

    def test_format_geographic(self):
        assert format_geographic(48.8566, 2.3522) == "LAT 48.85660\nLON 2.35220"

    def test_format_world_position(self):
        assert format_world_position(np.array([12.4, 1500.0, -3.6])) == "POS X:12 Y:1500 Z:-4"


class TestGaugeMath:
    """Test interpolation helpers and the VSI fill mapping."""

    def test_clamp01(self):
        assert clamp01(-0.5) == 0.0
        assert clamp01(0.3) == 0.3
        assert clamp01(1.7) == 1.0

    def test_lerp_endpoints_exact(self):
        assert lerp(3.3, 7.7, 0.0) == 3.3
        assert lerp(3.3, 7.7, 1.0) == 7.7

    def test_lerp_clamps_t(self):
        assert lerp(0.0, 10.0, 2.0) == 10.0
        assert lerp(0.0, 10.0, -1.0) == 0.0

    def test_lerp_midpoint(self):
        assert lerp(-4.0, 4.0, 0.5) == 0.0

    def test_inverse_lerp(self):
        assert inverse_lerp(-20.0, 20.0, 10.0) == 0.75
        assert inverse_lerp(5.0, 5.0, 5.0) == 0.0

    @pytest.mark.parametrize("vs,expected", [
        (0.0, 0.5),
        (20.0, 1.0),
        (-20.0, 0.0),
        (10.0, 0.75),
        (35.0, 1.0),
        (-500.0, 0.0),
    ])
    def test_vsi_fill(self, vs, expected):
        assert vsi_fill(vs, 20.0) == expected

    def test_vsi_fill_custom_range(self):
        assert vsi_fill(5.0, 10.0) == 0.75
