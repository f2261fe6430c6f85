"""Instrument settings.

Static configuration shared by the instrument provider and display. Both
dataclasses are frozen and validated on construction; build a modified copy
with ``with_overrides`` instead of mutating.

Example:
    >>> from cockpit.config import GeoOrigin, HudSettings
    >>>
    >>> settings = HudSettings(
    ...     geo=GeoOrigin(enable_geographic_mapping=True, origin_latitude=45.0),
    ...     smooth_factor=0.0,
    ... )
    >>> round(settings.geo.longitude_scale())
    78715
"""

import math
from dataclasses import dataclass, field, replace

from beartype import beartype

# =============================================================================
# Geographic Origin
# =============================================================================


@beartype
@dataclass(frozen=True)
class GeoOrigin:
    """Local-flat mapping between world coordinates and latitude/longitude.

    World +Z is north and +X is east. The world origin maps to
    (origin_latitude, origin_longitude).

    Attributes:
        origin_latitude: Latitude of the world origin [deg]
        origin_longitude: Longitude of the world origin [deg]
        world_unit_to_meters: Meters per world unit
        meters_per_degree_latitude: Meters per degree of latitude
        meters_per_degree_longitude: Meters per degree of longitude, used
            when auto_update_longitude_scale is off
        enable_geographic_mapping: Compute latitude/longitude
        auto_update_longitude_scale: Derive meters per degree of longitude
            from the origin latitude
    """
    origin_latitude: float | int = 48.8566  # Paris
    origin_longitude: float | int = 2.3522
    world_unit_to_meters: float | int = 1.0
    meters_per_degree_latitude: float | int = 111_320.0
    meters_per_degree_longitude: float | int = 75_000.0  # ~48 deg N
    enable_geographic_mapping: bool = False
    auto_update_longitude_scale: bool = True

    def __post_init__(self) -> None:
        if self.world_unit_to_meters <= 0:
            raise ValueError(
                f"world_unit_to_meters must be positive, got {self.world_unit_to_meters}"
            )
        if self.meters_per_degree_latitude <= 0:
            raise ValueError(
                "meters_per_degree_latitude must be positive, "
                f"got {self.meters_per_degree_latitude}"
            )
        if self.meters_per_degree_longitude <= 0:
            raise ValueError(
                "meters_per_degree_longitude must be positive, "
                f"got {self.meters_per_degree_longitude}"
            )
        if not -90.0 <= self.origin_latitude <= 90.0:
            raise ValueError(f"origin_latitude must be in [-90, 90], got {self.origin_latitude}")

    def longitude_scale(self) -> float:
        """Meters per degree of longitude at the origin.

        Uses the configured origin latitude, never the body's live latitude,
        so the mapping stays a single flat plane.
        """
        if self.auto_update_longitude_scale:
            return self.meters_per_degree_latitude * math.cos(math.radians(self.origin_latitude))
        return float(self.meters_per_degree_longitude)


# =============================================================================
# HUD Settings
# =============================================================================


@beartype
@dataclass(frozen=True)
class HudSettings:
    """Settings for the instrument provider and display.

    Attributes:
        geo: Geographic mapping and world scale
        smooth_factor: Horizon smoothing (0 = instantaneous, 1 = frozen)
        pitch_pixels_per_degree: Horizon pitch-layer offset per degree [px]
        vsi_range: Full-scale vertical speed of the VSI bar (+/-) [units/s]
        fuel_fraction: Initial fuel gauge fraction (0-1)
    """
    geo: GeoOrigin = field(default_factory=GeoOrigin)
    smooth_factor: float | int = 0.15
    pitch_pixels_per_degree: float | int = 4.0
    vsi_range: float | int = 20.0
    fuel_fraction: float | int = 0.98

    def __post_init__(self) -> None:
        if not 0.0 <= self.smooth_factor <= 1.0:
            raise ValueError(f"smooth_factor must be in [0, 1], got {self.smooth_factor}")
        if not 0.0 <= self.fuel_fraction <= 1.0:
            raise ValueError(f"fuel_fraction must be in [0, 1], got {self.fuel_fraction}")
        if self.vsi_range <= 0:
            raise ValueError(f"vsi_range must be positive, got {self.vsi_range}")
        if not math.isfinite(self.pitch_pixels_per_degree):
            raise ValueError(
                f"pitch_pixels_per_degree must be finite, got {self.pitch_pixels_per_degree}"
            )

    def with_overrides(self, **changes: object) -> "HudSettings":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)
