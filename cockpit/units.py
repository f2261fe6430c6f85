"""Units module for cockpit instruments.

Provides a small Quantity class for the physical values shown on a flight
display (lengths, speeds, angles) with explicit unit conversion.

Design principles:
- Explicit over implicit: all conversions require calling .to()
- Type safe: beartype checks at runtime
- Immutable: frozen dataclasses prevent accidental mutation
"""

import math
from dataclasses import dataclass

from beartype import beartype

# =============================================================================
# Dimension and Unit Definitions
# =============================================================================

# Exact factor used by the airspeed readout: knots = m/s * MPS_TO_KNOTS
MPS_TO_KNOTS = 1.943844

DIMENSIONS = {
    "length": "m",
    "velocity": "m/s",
    "angle": "deg",
    "dimensionless": "1",
}

# Conversion factors TO base unit
# e.g., 1 ft = 0.3048 m, so CONVERSIONS["ft"] = 0.3048
CONVERSIONS: dict[str, tuple[float, str]] = {
    # Length
    "m": (1.0, "length"),
    "km": (1000.0, "length"),
    "ft": (0.3048, "length"),
    "nmi": (1852.0, "length"),
    # Velocity
    "m/s": (1.0, "velocity"),
    "km/h": (1.0 / 3.6, "velocity"),
    "kt": (1.0 / MPS_TO_KNOTS, "velocity"),
    "ft/s": (0.3048, "velocity"),
    "ft/min": (0.3048 / 60.0, "velocity"),
    # Angle
    "deg": (1.0, "angle"),
    "rad": (180.0 / math.pi, "angle"),
    # Dimensionless
    "1": (1.0, "dimensionless"),
    "%": (0.01, "dimensionless"),
}


def _get_dimension(unit: str) -> str:
    """Get the dimension for a unit string."""
    if unit not in CONVERSIONS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return CONVERSIONS[unit][1]


def _get_conversion_factor(unit: str) -> float:
    """Get the conversion factor to the base unit."""
    if unit not in CONVERSIONS:
        raise ValueError(f"Unknown unit: {unit!r}")
    return CONVERSIONS[unit][0]


def _convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a value between units of the same dimension."""
    from_dim = _get_dimension(from_unit)
    to_dim = _get_dimension(to_unit)

    if from_dim != to_dim:
        raise ValueError(
            f"Cannot convert between different dimensions: {from_dim} and {to_dim}"
        )

    if from_unit == "m/s" and to_unit == "kt":
        return value * MPS_TO_KNOTS

    base_value = value * _get_conversion_factor(from_unit)
    return base_value / _get_conversion_factor(to_unit)


# =============================================================================
# Quantity Class
# =============================================================================


@beartype
@dataclass(frozen=True, slots=True)
class Quantity:
    """A physical quantity with value, unit, and dimension.

    Examples:
        >>> speed = meters_per_second(61.73)
        >>> print(speed.to("kt"))
        119.993 kt
    """

    value: float | int
    unit: str
    dimension: str

    def __post_init__(self) -> None:
        """Validate that unit matches dimension."""
        if self.unit not in CONVERSIONS:
            raise ValueError(f"Unknown unit: {self.unit!r}")
        expected_dim = CONVERSIONS[self.unit][1]
        if self.dimension != expected_dim:
            raise ValueError(
                f"Unit {self.unit!r} has dimension {expected_dim!r}, "
                f"but {self.dimension!r} was specified"
            )

    def to(self, target_unit: str) -> "Quantity":
        """Convert to a different unit of the same dimension.

        Raises:
            ValueError: If target_unit is incompatible dimension
        """
        new_value = _convert(self.value, self.unit, target_unit)
        return Quantity(new_value, target_unit, self.dimension)

    @property
    def base_value(self) -> float:
        """Value in the base unit of this dimension."""
        return self.value * _get_conversion_factor(self.unit)

    def __repr__(self) -> str:
        return f"Quantity({self.value:.6g} {self.unit})"

    def __str__(self) -> str:
        return f"{self.value:.6g} {self.unit}"

    def __neg__(self) -> "Quantity":
        return Quantity(-self.value, self.unit, self.dimension)

    def __eq__(self, other: object) -> bool:
        """Check equality (compares base values for same dimension)."""
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        return math.isclose(self.base_value, other.base_value, rel_tol=1e-9)

    def __hash__(self) -> int:
        return hash((round(self.base_value, 9), self.dimension))


# =============================================================================
# Factory Functions
# =============================================================================


@beartype
def meters(value: float | int) -> Quantity:
    """Create a length quantity in meters."""
    return Quantity(value, "m", "length")


@beartype
def feet(value: float | int) -> Quantity:
    """Create a length quantity in feet."""
    return Quantity(value, "ft", "length")


@beartype
def meters_per_second(value: float | int) -> Quantity:
    """Create a velocity quantity in m/s."""
    return Quantity(value, "m/s", "velocity")


@beartype
def knots(value: float | int) -> Quantity:
    """Create a velocity quantity in knots."""
    return Quantity(value, "kt", "velocity")


@beartype
def feet_per_minute(value: float | int) -> Quantity:
    """Create a velocity quantity in ft/min."""
    return Quantity(value, "ft/min", "velocity")


@beartype
def degrees(value: float | int) -> Quantity:
    """Create an angle quantity in degrees."""
    return Quantity(value, "deg", "angle")
