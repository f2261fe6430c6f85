"""Scripted kinematic body for driving the instruments without a flight model.

The body flies along its nose at a commanded true airspeed, drifted by a
constant wind, while heading, pitch and roll change at fixed rates. It
satisfies both the spatial-state source and the vehicle contracts used by
the instrument provider, so it can stand in for a simulated aircraft in
demos and tests.

Example:
    >>> import numpy as np
    >>> from cockpit.dynamics import KinematicBody
    >>>
    >>> body = KinematicBody(
    ...     position=np.array([0.0, 1500.0, 0.0]),
    ...     airspeed=61.73,
    ...     heading_deg=45.0,
    ... )
    >>> body.turn_rate_deg = 3.0  # standard rate turn
    >>> for _ in range(60):
    ...     body.advance(dt=1.0)
"""

from dataclasses import dataclass, field

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from cockpit.dynamics.frames import wrap_degrees
from cockpit.dynamics.state import OrientationFrame, SpatialState


@beartype
@dataclass
class KinematicBody:
    """Attitude-and-airspeed driven body.

    Attributes:
        position: World position [world units]
        airspeed: True airspeed along the nose [world units/s]
        heading_deg: Compass heading [degrees]
        pitch_deg: Nose-up pitch [degrees]
        roll_deg: Right-wing-down roll [degrees]
        wind: Air-mass velocity added to the airspeed vector [world units/s]
        throttle: Reported throttle setting (0-1)
        turn_rate_deg: Heading change rate [deg/s]
        pitch_rate_deg: Pitch change rate [deg/s]
        roll_rate_deg: Roll change rate [deg/s]
        time: Elapsed time [s]
    """
    position: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    airspeed: float | int = 0.0
    heading_deg: float | int = 0.0
    pitch_deg: float | int = 0.0
    roll_deg: float | int = 0.0
    wind: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))
    throttle: float | int = 0.0
    turn_rate_deg: float | int = 0.0
    pitch_rate_deg: float | int = 0.0
    roll_rate_deg: float | int = 0.0
    time: float | int = 0.0

    def __post_init__(self) -> None:
        self.position = self.position.copy()
        self.wind = self.wind.copy()

    @property
    def frame(self) -> OrientationFrame:
        return OrientationFrame.from_attitude(self.heading_deg, self.pitch_deg, self.roll_deg)

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Ground velocity: airspeed along the nose plus wind."""
        return self.frame.forward * self.airspeed + self.wind

    def spatial_state(self) -> SpatialState:
        """Snapshot of the current position, frame and velocity."""
        return SpatialState(
            position=self.position.copy(),
            frame=self.frame,
            velocity=self.velocity,
        )

    def advance(self, dt: float | int) -> None:
        """Move the body forward by dt seconds (explicit Euler)."""
        if dt <= 0:
            return
        self.position = self.position + self.velocity * dt
        self.heading_deg = wrap_degrees(self.heading_deg + self.turn_rate_deg * dt)
        self.pitch_deg = float(np.clip(self.pitch_deg + self.pitch_rate_deg * dt, -89.0, 89.0))
        self.roll_deg = self.roll_deg + self.roll_rate_deg * dt
        self.time = self.time + dt
