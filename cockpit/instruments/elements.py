"""Display-element contracts and headless implementations.

The display writes to elements through narrow capability protocols, so any
widget toolkit can be bound by wrapping its widgets in objects exposing the
matching attribute. The headless classes here hold the last written value
and are used by tests, the console demo and hosts without a UI.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from beartype import beartype

# =============================================================================
# Element Protocols
# =============================================================================


@runtime_checkable
class TextElement(Protocol):
    """Element accepting a text assignment."""

    text: str


@runtime_checkable
class FillElement(Protocol):
    """Element accepting a normalized fill ratio (0-1)."""

    fill_amount: float


@runtime_checkable
class RotationElement(Protocol):
    """Element accepting a rotation about the view axis [deg]."""

    rotation: float


@runtime_checkable
class TranslationElement(Protocol):
    """Element accepting an anchored (x, y) position [px]."""

    anchored_position: tuple[float, float]


# =============================================================================
# Headless Elements
# =============================================================================


@beartype
@dataclass
class TextLabel:
    """Text element that stores the assigned text."""
    text: str = ""


@beartype
@dataclass
class FillGauge:
    """Fill-ratio element that stores the assigned ratio."""
    fill_amount: float | int = 0.0


@beartype
@dataclass
class HorizonLayer:
    """Transform element supporting both rotation and translation.

    Attributes:
        rotation: Rotation about the view axis [deg]
        anchored_position: Offset from the anchor [px]
    """
    rotation: float | int = 0.0
    anchored_position: tuple[float | int, float | int] = (0.0, 0.0)
