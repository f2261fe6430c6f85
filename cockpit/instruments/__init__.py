"""Flight instruments: data provider and display.

The provider derives instrument readings from a body's spatial state; the
display smooths and writes them to bound display elements every frame.

Available components:
    InstrumentDataProvider: Spatial state -> InstrumentSnapshot
    InstrumentDisplay: InstrumentSnapshot -> text, gauges and horizon
"""

from cockpit.instruments.display import DisplayElements, DisplayState, InstrumentDisplay
from cockpit.instruments.elements import (
    FillElement,
    FillGauge,
    HorizonLayer,
    RotationElement,
    TextElement,
    TextLabel,
    TranslationElement,
)
from cockpit.instruments.provider import (
    InstrumentDataProvider,
    InstrumentSnapshot,
    SpatialStateSource,
    Vehicle,
    heading_degrees,
    pitch_degrees,
    roll_degrees,
)

__all__ = [
    # Provider
    "InstrumentDataProvider",
    "InstrumentSnapshot",
    "SpatialStateSource",
    "Vehicle",
    "heading_degrees",
    "pitch_degrees",
    "roll_degrees",
    # Display
    "InstrumentDisplay",
    "DisplayElements",
    "DisplayState",
    # Elements
    "TextElement",
    "FillElement",
    "RotationElement",
    "TranslationElement",
    "TextLabel",
    "FillGauge",
    "HorizonLayer",
]
