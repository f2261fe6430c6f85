"""Spatial state of a rigid body as seen by the flight instruments.

The state contains:
- Position (3): [x, y, z] in world units (X east, Y up, Z north)
- Orientation frame: forward, up and right unit vectors in world axes
- Velocity (3): [vx, vy, vz] in world units per second

Quaternion convention:
- Scalar-first: q = [q0, q1, q2, q3] where q0 is the scalar part
- Rotates body axes (forward = +Z, up = +Y, right = +X) into world axes
"""

import math
from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from cockpit.dynamics.frames import WORLD_EAST, WORLD_NORTH, WORLD_UP

# =============================================================================
# Quaternion Utilities
# =============================================================================


@beartype
def normalize_quaternion(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """Normalize a quaternion to unit length."""
    norm = np.linalg.norm(q)
    if norm < 1e-10:
        return np.array([1.0, 0.0, 0.0, 0.0])
    return q / norm


@beartype
def quaternion_to_dcm(q: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert quaternion to Direction Cosine Matrix (DCM).

    Args:
        q: Quaternion [q0, q1, q2, q3]

    Returns:
        3x3 rotation matrix; its columns are the rotated X, Y, Z axes
    """
    q = normalize_quaternion(q)
    q0, q1, q2, q3 = q

    return np.array([
        [1 - 2*(q2**2 + q3**2), 2*(q1*q2 - q0*q3), 2*(q1*q3 + q0*q2)],
        [2*(q1*q2 + q0*q3), 1 - 2*(q1**2 + q3**2), 2*(q2*q3 - q0*q1)],
        [2*(q1*q3 - q0*q2), 2*(q2*q3 + q0*q1), 1 - 2*(q1**2 + q2**2)],
    ])


@beartype
def axis_angle_to_quaternion(axis: NDArray[np.float64], angle_deg: float | int) -> NDArray[np.float64]:
    """Quaternion for a rotation of angle_deg about axis (right-hand rule)."""
    norm = np.linalg.norm(axis)
    if norm < 1e-12:
        return np.array([1.0, 0.0, 0.0, 0.0])
    half = math.radians(angle_deg) / 2
    x, y, z = axis / norm * math.sin(half)
    return np.array([math.cos(half), x, y, z])


# =============================================================================
# Orientation Frame
# =============================================================================


def _check_vector(name: str, value: NDArray[np.float64]) -> None:
    if value.shape != (3,):
        raise ValueError(f"{name} must be shape (3,), got {value.shape}")


@beartype
@dataclass
class OrientationFrame:
    """Forward/up/right basis of a body, expressed in world axes.

    Attributes:
        forward: Nose direction
        up: Canopy direction
        right: Right wing direction
    """
    forward: NDArray[np.float64]
    up: NDArray[np.float64]
    right: NDArray[np.float64]

    def __post_init__(self) -> None:
        _check_vector("forward", self.forward)
        _check_vector("up", self.up)
        _check_vector("right", self.right)

    @classmethod
    def identity(cls) -> "OrientationFrame":
        """Level, looking north."""
        return cls(
            forward=WORLD_NORTH.copy(),
            up=WORLD_UP.copy(),
            right=WORLD_EAST.copy(),
        )

    @classmethod
    def from_quaternion(cls, q: NDArray[np.float64]) -> "OrientationFrame":
        """Build the frame from a body-to-world quaternion."""
        dcm = quaternion_to_dcm(q)
        return cls(
            forward=dcm[:, 2].copy(),
            up=dcm[:, 1].copy(),
            right=dcm[:, 0].copy(),
        )

    @classmethod
    def from_attitude(
        cls,
        heading_deg: float | int = 0.0,
        pitch_deg: float | int = 0.0,
        roll_deg: float | int = 0.0,
    ) -> "OrientationFrame":
        """Build the frame from aviation attitude angles.

        Args:
            heading_deg: Compass heading (0 = north, 90 = east) [degrees]
            pitch_deg: Nose-up pitch [degrees]
            roll_deg: Right-wing-down roll [degrees]
        """
        h = math.radians(heading_deg)
        p = math.radians(pitch_deg)
        r = math.radians(roll_deg)

        forward = np.array([
            math.cos(p) * math.sin(h),
            math.sin(p),
            math.cos(p) * math.cos(h),
        ])
        # Wings-level basis, then roll about forward
        level_up = np.array([
            -math.sin(p) * math.sin(h),
            math.cos(p),
            -math.sin(p) * math.cos(h),
        ])
        level_right = np.array([math.cos(h), 0.0, -math.sin(h)])

        up = math.cos(r) * level_up + math.sin(r) * level_right
        right = math.cos(r) * level_right - math.sin(r) * level_up

        return cls(forward=forward, up=up, right=right)

    def is_orthonormal(self, atol: float = 1e-6) -> bool:
        """Check unit lengths, mutual orthogonality and right = up x forward."""
        basis = np.column_stack([self.right, self.up, self.forward])
        if not np.allclose(basis.T @ basis, np.eye(3), atol=atol):
            return False
        return bool(np.allclose(np.cross(self.up, self.forward), self.right, atol=atol))

    def copy(self) -> "OrientationFrame":
        return OrientationFrame(
            forward=self.forward.copy(),
            up=self.up.copy(),
            right=self.right.copy(),
        )


# =============================================================================
# Spatial State
# =============================================================================


@beartype
@dataclass
class SpatialState:
    """Position, orientation and linear velocity of a body.

    Attributes:
        position: [x, y, z] world position [world units]
        frame: Orientation frame
        velocity: [vx, vy, vz] linear velocity [world units/s]
    """
    position: NDArray[np.float64]
    frame: OrientationFrame
    velocity: NDArray[np.float64]

    def __post_init__(self) -> None:
        _check_vector("Position", self.position)
        _check_vector("Velocity", self.velocity)

    @classmethod
    def at_rest(cls) -> "SpatialState":
        """Body at the world origin, level, looking north, not moving."""
        return cls(
            position=np.zeros(3),
            frame=OrientationFrame.identity(),
            velocity=np.zeros(3),
        )

    @classmethod
    def from_attitude(
        cls,
        x: float | int = 0.0,
        y: float | int = 0.0,  # Height (positive up)
        z: float | int = 0.0,
        vx: float | int = 0.0,
        vy: float | int = 0.0,
        vz: float | int = 0.0,
        heading_deg: float | int = 0.0,
        pitch_deg: float | int = 0.0,
        roll_deg: float | int = 0.0,
    ) -> "SpatialState":
        """Create a state from a position, velocity and attitude angles."""
        return cls(
            position=np.array([x, y, z], dtype=np.float64),
            frame=OrientationFrame.from_attitude(heading_deg, pitch_deg, roll_deg),
            velocity=np.array([vx, vy, vz], dtype=np.float64),
        )

    @property
    def speed(self) -> float:
        """Velocity magnitude [world units/s]."""
        return float(np.linalg.norm(self.velocity))

    def copy(self) -> "SpatialState":
        return SpatialState(
            position=self.position.copy(),
            frame=self.frame.copy(),
            velocity=self.velocity.copy(),
        )
