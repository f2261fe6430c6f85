"""Cockpit - Flight instruments derived from a rigid body's spatial state.

This package converts a body's position, orientation and velocity into
aviation readings (airspeed, altitude, heading, pitch, roll, vertical speed,
approximate latitude/longitude) and drives HUD display elements from them.

Example:
    >>> from cockpit import (
    ...     DisplayElements, HudSettings, InstrumentDataProvider,
    ...     InstrumentDisplay, KinematicBody, TextLabel,
    ... )
    >>>
    >>> body = KinematicBody(airspeed=61.73, heading_deg=45.0, pitch_deg=5.2)
    >>> provider = InstrumentDataProvider(body=body, vehicle=body, settings=HudSettings())
    >>> elements = DisplayElements(pitch_text=TextLabel())
    >>> display = InstrumentDisplay(provider=provider, elements=elements)
    >>> _ = display.tick()
    >>> elements.pitch_text.text
    'PITCH +5.2'
"""

__version__ = "0.1.0"

from cockpit.config import GeoOrigin, HudSettings
from cockpit.dynamics import KinematicBody, OrientationFrame, SpatialState
from cockpit.instruments import (
    DisplayElements,
    DisplayState,
    FillGauge,
    HorizonLayer,
    InstrumentDataProvider,
    InstrumentDisplay,
    InstrumentSnapshot,
    SpatialStateSource,
    TextLabel,
    Vehicle,
)
from cockpit.units import MPS_TO_KNOTS, Quantity

__all__ = [
    # Version
    "__version__",
    # Settings
    "GeoOrigin",
    "HudSettings",
    # State
    "OrientationFrame",
    "SpatialState",
    "KinematicBody",
    # Instruments
    "InstrumentDataProvider",
    "InstrumentSnapshot",
    "InstrumentDisplay",
    "DisplayElements",
    "DisplayState",
    "SpatialStateSource",
    "Vehicle",
    # Headless elements
    "TextLabel",
    "FillGauge",
    "HorizonLayer",
    # Units
    "Quantity",
    "MPS_TO_KNOTS",
]
