"""Spatial state of the body feeding the instruments.

This module provides the orientation frame and spatial state the
instrument provider reads, quaternion and vector helpers, and a scripted
kinematic body for driving the instruments without a flight model.

Example:
    >>> from cockpit.dynamics import SpatialState
    >>>
    >>> state = SpatialState.from_attitude(y=1500.0, heading_deg=45.0, pitch_deg=5.2)
    >>> state.frame.is_orthonormal()
    True
"""

from cockpit.dynamics.frames import (
    DEGENERATE_EPSILON,
    WORLD_EAST,
    WORLD_NORTH,
    WORLD_UP,
    is_degenerate,
    normalize,
    project_on_plane,
    signed_angle,
    wrap_degrees,
)
from cockpit.dynamics.kinematic import KinematicBody
from cockpit.dynamics.state import (
    OrientationFrame,
    SpatialState,
    axis_angle_to_quaternion,
    normalize_quaternion,
    quaternion_to_dcm,
)

__all__ = [
    # State
    "OrientationFrame",
    "SpatialState",
    "KinematicBody",
    # Quaternion utilities
    "quaternion_to_dcm",
    "axis_angle_to_quaternion",
    "normalize_quaternion",
    # Frames and vectors
    "WORLD_EAST",
    "WORLD_UP",
    "WORLD_NORTH",
    "DEGENERATE_EPSILON",
    "normalize",
    "project_on_plane",
    "is_degenerate",
    "signed_angle",
    "wrap_degrees",
]
