"""Instrument data provider.

Turns the spatial state of a body into the values a pilot reads:
airspeed, altitude, heading, pitch, roll, vertical speed and an approximate
latitude/longitude.

Pitch and roll are derived independently from the orientation frame
rather than from one Euler decomposition, so neither reading couples into
the other as the nose approaches vertical:
- Pitch: signed angle between the nose and its horizontal projection,
  measured about the level right axis (world up x horizontal nose), not
  the body's right axis. The two agree while |roll| < 90; inverted, the
  body axis would flip the sign, the level axis keeps nose up positive.
- Roll: signed angle between the body up and world up, both projected on
  the plane normal to the nose, measured about the nose (right wing down
  positive).

Example:
    >>> from cockpit.dynamics import KinematicBody
    >>> from cockpit.instruments import InstrumentDataProvider
    >>>
    >>> body = KinematicBody(airspeed=50.0, heading_deg=90.0, pitch_deg=5.0)
    >>> provider = InstrumentDataProvider(body=body, vehicle=body)
    >>> snap = provider.snapshot()
    >>> round(snap.heading_degrees)
    90
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from cockpit.config import HudSettings
from cockpit.dynamics.frames import (
    WORLD_UP,
    is_degenerate,
    normalize,
    project_on_plane,
    signed_angle,
    wrap_degrees,
)
from cockpit.dynamics.state import OrientationFrame, SpatialState
from cockpit.units import MPS_TO_KNOTS, Quantity, meters, meters_per_second

logger = logging.getLogger(__name__)

# =============================================================================
# Collaborator Protocols
# =============================================================================


@runtime_checkable
class SpatialStateSource(Protocol):
    """Read-only access to a body's current spatial state."""

    def spatial_state(self) -> SpatialState:
        ...


@runtime_checkable
class Vehicle(Protocol):
    """Vehicle-reported values.

    Attributes:
        airspeed: Authoritative airspeed [m/s], or None when not available
        throttle: Throttle setting, nominally 0-1
    """

    airspeed: float | None
    throttle: float


# =============================================================================
# Attitude Derivation
# =============================================================================


@beartype
def heading_degrees(frame: OrientationFrame) -> float:
    """Compass heading of the nose in [0, 360).

    With the nose near vertical the heading is taken from the direction the
    canopy faces away from (the belly when nose up, the top when nose down).
    """
    forward = normalize(frame.forward)
    horizontal = project_on_plane(forward, WORLD_UP)
    if is_degenerate(horizontal):
        sign = 1.0 if forward[1] >= 0 else -1.0
        horizontal = project_on_plane(-normalize(frame.up) * sign, WORLD_UP)
        if is_degenerate(horizontal):
            logger.debug("Heading undefined for frame %s; reading 0", frame)
            return 0.0
    return wrap_degrees(math.degrees(math.atan2(horizontal[0], horizontal[2])))


@beartype
def pitch_degrees(frame: OrientationFrame) -> float:
    """Nose-up pitch in (-90, 90); 0 for a near-vertical nose."""
    forward = normalize(frame.forward)
    horizontal = project_on_plane(forward, WORLD_UP)
    if is_degenerate(horizontal):
        logger.debug("Nose near vertical; pitch reads 0")
        return 0.0
    level_right = np.cross(WORLD_UP, horizontal)
    return signed_angle(forward, horizontal, level_right)


@beartype
def roll_degrees(frame: OrientationFrame) -> float:
    """Right-wing-down roll in (-180, 180]; 0 when either projection is degenerate."""
    forward = normalize(frame.forward)
    body_up = project_on_plane(normalize(frame.up), forward)
    level_up = project_on_plane(WORLD_UP, forward)
    if is_degenerate(body_up) or is_degenerate(level_up):
        logger.debug("Roll reference degenerate; roll reads 0")
        return 0.0
    return signed_angle(body_up, level_up, forward)


# =============================================================================
# Snapshot
# =============================================================================


@beartype
@dataclass(frozen=True)
class InstrumentSnapshot:
    """Instrument readings derived from one spatial state.

    Attributes:
        speed_mps: Airspeed [m/s]
        speed_knots: Airspeed [kt], exactly speed_mps * 1.943844
        altitude_meters: Height above the world origin [m]
        heading_degrees: Compass heading [deg], in [0, 360)
        pitch_degrees: Nose-up pitch [deg]
        roll_degrees: Right-wing-down roll [deg]
        vertical_speed: Vertical component of velocity [world units/s]
        latitude: Approximate latitude [deg], 0 when mapping is disabled
        longitude: Approximate longitude [deg], 0 when mapping is disabled
        world_position: Raw world position [world units]
        geographic_mapping: Whether latitude/longitude were computed
    """
    speed_mps: float
    speed_knots: float
    altitude_meters: float
    heading_degrees: float
    pitch_degrees: float
    roll_degrees: float
    vertical_speed: float
    latitude: float = 0.0
    longitude: float = 0.0
    world_position: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    geographic_mapping: bool = False

    @property
    def airspeed(self) -> Quantity:
        return meters_per_second(self.speed_mps)

    @property
    def altitude(self) -> Quantity:
        return meters(self.altitude_meters)


# =============================================================================
# Provider
# =============================================================================


@beartype
@dataclass
class InstrumentDataProvider:
    """Derives an InstrumentSnapshot from a body's spatial state.

    Stateless between calls: every snapshot() reads the source afresh.
    Missing collaborators degrade to defaults instead of raising.

    Attributes:
        body: Source of position, orientation and velocity
        vehicle: Source of authoritative airspeed and throttle
        settings: Unit scale and geographic mapping
    """
    body: SpatialStateSource | None = None
    vehicle: Vehicle | None = None
    settings: HudSettings = field(default_factory=HudSettings)

    def snapshot(self) -> InstrumentSnapshot:
        """Read the current spatial state and derive instrument values."""
        if self.body is None:
            logger.debug("No spatial state source bound; using rest state")
            state = SpatialState.at_rest()
        else:
            state = self.body.spatial_state()

        geo = self.settings.geo
        speed = self._speed(state)

        latitude = 0.0
        longitude = 0.0
        if geo.enable_geographic_mapping:
            # Refreshed before the longitude computation below
            meters_per_degree_longitude = geo.longitude_scale()
            meters_north = state.position[2] * geo.world_unit_to_meters
            meters_east = state.position[0] * geo.world_unit_to_meters
            latitude = float(geo.origin_latitude + meters_north / geo.meters_per_degree_latitude)
            longitude = float(geo.origin_longitude + meters_east / meters_per_degree_longitude)

        return InstrumentSnapshot(
            speed_mps=speed,
            speed_knots=speed * MPS_TO_KNOTS,
            altitude_meters=float(state.position[1] * geo.world_unit_to_meters),
            heading_degrees=heading_degrees(state.frame),
            pitch_degrees=pitch_degrees(state.frame),
            roll_degrees=roll_degrees(state.frame),
            vertical_speed=float(state.velocity[1]),
            latitude=latitude,
            longitude=longitude,
            world_position=state.position.copy(),
            geographic_mapping=geo.enable_geographic_mapping,
        )

    def _speed(self, state: SpatialState) -> float:
        """Vehicle-reported airspeed when available, else velocity magnitude."""
        if self.vehicle is not None:
            airspeed = self.vehicle.airspeed
            if airspeed is not None:
                return float(airspeed)
        logger.debug("No vehicle airspeed; using velocity magnitude")
        return state.speed
