"""Readout formats and gauge math for the instrument display.

All functions are pure. The text formats are the observable contract of the
HUD and are kept byte-exact.
"""

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# =============================================================================
# Scalar Helpers
# =============================================================================


@beartype
def clamp01(value: float | int) -> float:
    """Clamp to [0, 1]."""
    return float(min(max(value, 0.0), 1.0))


@beartype
def lerp(a: float | int, b: float | int, t: float | int) -> float:
    """Linear interpolation from a to b, t clamped to [0, 1].

    Written as (1 - t) * a + t * b so that t = 1 returns b exactly.
    """
    t = clamp01(t)
    return float((1.0 - t) * a + t * b)


@beartype
def inverse_lerp(a: float | int, b: float | int, value: float | int) -> float:
    """Position of value between a and b, clamped to [0, 1]."""
    if a == b:
        return 0.0
    return clamp01((value - a) / (b - a))


# =============================================================================
# Text Formats
# =============================================================================


@beartype
def format_signed(value: float | int) -> str:
    """One decimal with explicit sign; "0.0" when it rounds to zero.

    Examples:
        >>> format_signed(5.2)
        '+5.2'
        >>> format_signed(-10.34)
        '-10.3'
        >>> format_signed(-0.04)
        '0.0'
    """
    if round(float(value), 1) == 0:
        return "0.0"
    return f"{value:+.1f}"


@beartype
def format_speed(knots: float | int) -> str:
    return f"SPD {knots:.0f} kt"


@beartype
def format_altitude(meters: float | int) -> str:
    return f"ALT {meters:.0f} m"


@beartype
def format_heading(heading_deg: float | int) -> str:
    """Zero-padded three-digit heading, 359.6 reads as 000."""
    return f"HDG {int(round(float(heading_deg))) % 360:03d}"


@beartype
def format_pitch(pitch_deg: float | int) -> str:
    return f"PITCH {format_signed(pitch_deg)}"


@beartype
def format_roll(roll_deg: float | int) -> str:
    return f"ROLL {format_signed(roll_deg)}"


@beartype
def format_vertical_speed(vertical_speed: float | int) -> str:
    return f"VS {format_signed(vertical_speed)}"


@beartype
def format_percent(fraction: float | int) -> str:
    return f"{fraction * 100.0:.0f}%"


@beartype
def format_geographic(latitude: float | int, longitude: float | int) -> str:
    return f"LAT {latitude:.5f}\nLON {longitude:.5f}"


@beartype
def format_world_position(position: NDArray[np.float64]) -> str:
    x, y, z = position
    return f"POS X:{x:.0f} Y:{y:.0f} Z:{z:.0f}"


# =============================================================================
# Gauges
# =============================================================================


@beartype
def vsi_fill(vertical_speed: float | int, vsi_range: float | int) -> float:
    """VSI bar fill: 0.5 at zero rate, 0 at -vsi_range, 1 at +vsi_range."""
    clamped = min(max(vertical_speed, -vsi_range), vsi_range)
    return inverse_lerp(-vsi_range, vsi_range, clamped)
