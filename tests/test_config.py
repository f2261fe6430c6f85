"""Tests for instrument settings."""

import dataclasses
import math

import pytest

from cockpit.config import GeoOrigin, HudSettings


class TestGeoOrigin:
    """Test GeoOrigin defaults, validation and longitude scale."""

    def test_defaults(self):
        geo = GeoOrigin()
        assert geo.origin_latitude == 48.8566
        assert geo.origin_longitude == 2.3522
        assert geo.world_unit_to_meters == 1.0
        assert geo.meters_per_degree_latitude == 111_320.0
        assert not geo.enable_geographic_mapping
        assert geo.auto_update_longitude_scale

    @pytest.mark.parametrize("field_name", [
        "world_unit_to_meters",
        "meters_per_degree_latitude",
        "meters_per_degree_longitude",
    ])
    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_non_positive_scale_raises(self, field_name, value):
        with pytest.raises(ValueError, match=field_name):
            GeoOrigin(**{field_name: value})

    def test_latitude_out_of_range_raises(self):
        with pytest.raises(ValueError, match="origin_latitude"):
            GeoOrigin(origin_latitude=91.0)

    def test_auto_longitude_scale_from_origin_latitude(self):
        geo = GeoOrigin(origin_latitude=60.0)
        assert geo.longitude_scale() == pytest.approx(111_320.0 * math.cos(math.radians(60.0)))

    def test_fixed_longitude_scale(self):
        geo = GeoOrigin(
            origin_latitude=60.0,
            meters_per_degree_longitude=70_000.0,
            auto_update_longitude_scale=False,
        )
        assert geo.longitude_scale() == 70_000.0

    def test_frozen(self):
        geo = GeoOrigin()
        with pytest.raises(dataclasses.FrozenInstanceError):
            geo.origin_latitude = 0.0  # type: ignore


class TestHudSettings:
    """Test HudSettings defaults, validation and overrides."""

    def test_defaults(self):
        settings = HudSettings()
        assert settings.smooth_factor == 0.15
        assert settings.pitch_pixels_per_degree == 4.0
        assert settings.vsi_range == 20.0
        assert settings.fuel_fraction == 0.98
        assert settings.geo == GeoOrigin()

    @pytest.mark.parametrize("factor", [-0.1, 1.5])
    def test_smooth_factor_out_of_range_raises(self, factor):
        with pytest.raises(ValueError, match="smooth_factor"):
            HudSettings(smooth_factor=factor)

    @pytest.mark.parametrize("factor", [0.0, 1.0])
    def test_smooth_factor_bounds_accepted(self, factor):
        assert HudSettings(smooth_factor=factor).smooth_factor == factor

    @pytest.mark.parametrize("fraction", [-0.01, 1.2])
    def test_fuel_fraction_out_of_range_raises(self, fraction):
        with pytest.raises(ValueError, match="fuel_fraction"):
            HudSettings(fuel_fraction=fraction)

    @pytest.mark.parametrize("fraction", [0.0, 1.0])
    def test_fuel_fraction_bounds_accepted(self, fraction):
        assert HudSettings(fuel_fraction=fraction).fuel_fraction == fraction

    def test_vsi_range_must_be_positive(self):
        with pytest.raises(ValueError, match="vsi_range"):
            HudSettings(vsi_range=0.0)

    def test_pitch_scale_must_be_finite(self):
        with pytest.raises(ValueError, match="pitch_pixels_per_degree"):
            HudSettings(pitch_pixels_per_degree=math.inf)

    def test_negative_pitch_scale_allowed(self):
        """Inverted screen axes are a valid configuration."""
        assert HudSettings(pitch_pixels_per_degree=-4.0).pitch_pixels_per_degree == -4.0

    def test_with_overrides_returns_new_settings(self):
        settings = HudSettings()
        changed = settings.with_overrides(smooth_factor=0.0, vsi_range=10.0)
        assert changed.smooth_factor == 0.0
        assert changed.vsi_range == 10.0
        assert settings.smooth_factor == 0.15

    def test_with_overrides_revalidates(self):
        with pytest.raises(ValueError, match="smooth_factor"):
            HudSettings().with_overrides(smooth_factor=2.0)
