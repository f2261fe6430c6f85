"""World axes and vector helpers for attitude derivation.

World frame (host engine convention):
- X: east
- Y: up
- Z: north

A body at identity orientation looks north (forward = +Z) with its top
toward +Y and its right wing toward +X. For every orientation frame
right = up x forward.
"""

import math

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

WORLD_EAST = np.array([1.0, 0.0, 0.0])
WORLD_UP = np.array([0.0, 1.0, 0.0])
WORLD_NORTH = np.array([0.0, 0.0, 1.0])

# Squared length below which a projected vector has no usable direction
DEGENERATE_EPSILON = 1e-8

# Wrapped angles this close below 360 read as 0
WRAP_TOLERANCE_DEG = 1e-9


@beartype
def normalize(v: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return v scaled to unit length, or the zero vector if v has none."""
    norm = np.linalg.norm(v)
    if norm < 1e-12:
        return np.zeros(3)
    return v / norm


@beartype
def project_on_plane(v: NDArray[np.float64], normal: NDArray[np.float64]) -> NDArray[np.float64]:
    """Remove the component of v along the (unit) plane normal."""
    return v - np.dot(v, normal) * normal


@beartype
def is_degenerate(v: NDArray[np.float64]) -> bool:
    """True when v is too short to define a direction."""
    return bool(np.dot(v, v) < DEGENERATE_EPSILON)


@beartype
def signed_angle(
    v_from: NDArray[np.float64],
    v_to: NDArray[np.float64],
    axis: NDArray[np.float64],
) -> float:
    """Signed angle in degrees rotating v_from onto v_to about axis.

    The sign follows the right-hand rule on the numeric cross product:
    positive when cross(v_from, v_to) points along axis.

    Args:
        v_from: Start direction (need not be unit length)
        v_to: End direction (need not be unit length)
        axis: Reference axis for the sign

    Returns:
        Angle in degrees, in (-180, 180]
    """
    a = normalize(v_from)
    b = normalize(v_to)
    sin_term = float(np.dot(np.cross(a, b), normalize(axis)))
    cos_term = float(np.dot(a, b))
    return math.degrees(math.atan2(sin_term, cos_term))


@beartype
def wrap_degrees(angle: float | int) -> float:
    """Wrap an angle into [0, 360)."""
    wrapped = float(angle) % 360.0
    # Tiny negative angles wrap to (or just under) 360.0
    if wrapped >= 360.0 - WRAP_TOLERANCE_DEG:
        return 0.0
    return wrapped
