"""Instrument display.

Pulls one snapshot per frame from an InstrumentDataProvider and writes it to
bound display elements: text readouts, throttle/fuel/VSI gauges and the two
layers of the artificial horizon. Pitch and roll feeding the horizon are
passed through a single-pole exponential filter to hide frame-to-frame
jitter; the text readouts show the raw values.

Example:
    >>> from cockpit.dynamics import KinematicBody
    >>> from cockpit.instruments import (
    ...     DisplayElements, InstrumentDataProvider, InstrumentDisplay, TextLabel,
    ... )
    >>>
    >>> body = KinematicBody(airspeed=61.73, heading_deg=45.0)
    >>> provider = InstrumentDataProvider(body=body, vehicle=body)
    >>> elements = DisplayElements(speed_text=TextLabel(), heading_text=TextLabel())
    >>> display = InstrumentDisplay(provider=provider, elements=elements)
    >>> _ = display.tick()
    >>> elements.heading_text.text
    'HDG 045'
"""

import logging
from dataclasses import dataclass, field, fields

from beartype import beartype

from cockpit.config import HudSettings
from cockpit.instruments.elements import (
    FillElement,
    RotationElement,
    TextElement,
    TranslationElement,
)
from cockpit.instruments.formatting import (
    clamp01,
    format_altitude,
    format_geographic,
    format_heading,
    format_percent,
    format_pitch,
    format_roll,
    format_signed,
    format_speed,
    format_vertical_speed,
    format_world_position,
    lerp,
    vsi_fill,
)
from cockpit.instruments.provider import (
    InstrumentDataProvider,
    InstrumentSnapshot,
    Vehicle,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Bindings and State
# =============================================================================


@beartype
@dataclass
class DisplayElements:
    """Display elements bound to each readout. Every binding is optional."""
    speed_text: TextElement | None = None
    altitude_text: TextElement | None = None
    heading_text: TextElement | None = None
    pitch_text: TextElement | None = None
    roll_text: TextElement | None = None
    vertical_speed_text: TextElement | None = None
    gps_text: TextElement | None = None

    throttle_fill: FillElement | None = None
    throttle_text: TextElement | None = None
    fuel_fill: FillElement | None = None
    fuel_text: TextElement | None = None
    vsi_fill: FillElement | None = None
    vsi_text: TextElement | None = None

    horizon_roll_layer: RotationElement | None = None
    horizon_pitch_layer: TranslationElement | None = None

    def unbound(self) -> list[str]:
        """Names of readouts with no element bound."""
        return [f.name for f in fields(self) if getattr(self, f.name) is None]


@beartype
@dataclass
class DisplayState:
    """Smoothed attitude carried from one frame to the next [deg]."""
    smoothed_pitch: float = 0.0
    smoothed_roll: float = 0.0

    def reset(self) -> None:
        self.smoothed_pitch = 0.0
        self.smoothed_roll = 0.0


# =============================================================================
# Display
# =============================================================================


@beartype
@dataclass
class InstrumentDisplay:
    """Drives display elements from provider snapshots, once per frame.

    Attributes:
        provider: Source of instrument snapshots
        elements: Bound display elements
        settings: Display settings; defaults to the provider's settings
        vehicle: Throttle source; defaults to the provider's vehicle
        fuel_fraction: Fuel gauge input, seeded from settings and writable
            by the host every frame
    """
    provider: InstrumentDataProvider
    elements: DisplayElements = field(default_factory=DisplayElements)
    settings: HudSettings | None = None
    vehicle: Vehicle | None = None
    fuel_fraction: float | int | None = None

    # Internal state
    _state: DisplayState = field(default_factory=DisplayState, init=False, repr=False)
    _had_vehicle: bool | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = self.provider.settings
        if self.fuel_fraction is None:
            self.fuel_fraction = self.settings.fuel_fraction
        unbound = self.elements.unbound()
        if unbound:
            logger.debug("Display elements not bound: %s", ", ".join(unbound))

    @property
    def state(self) -> DisplayState:
        return self._state

    def reset(self) -> None:
        """Drop smoothing history; the next tick starts again from level."""
        self._state.reset()

    def tick(self) -> InstrumentSnapshot:
        """Pull one snapshot and update every bound element.

        Returns:
            The snapshot the elements were drawn from
        """
        snap = self.provider.snapshot()

        t = 1.0 - self.settings.smooth_factor
        self._state.smoothed_pitch = lerp(self._state.smoothed_pitch, snap.pitch_degrees, t)
        self._state.smoothed_roll = lerp(self._state.smoothed_roll, snap.roll_degrees, t)

        self._write_texts(snap)
        self._write_gauges(snap)
        self._write_horizon()
        return snap

    # -------------------------------------------------------------------------
    # Element writers
    # -------------------------------------------------------------------------

    def _write_texts(self, snap: InstrumentSnapshot) -> None:
        el = self.elements
        _set_text(el.speed_text, format_speed(snap.speed_knots))
        _set_text(el.altitude_text, format_altitude(snap.altitude_meters))
        _set_text(el.heading_text, format_heading(snap.heading_degrees))
        _set_text(el.pitch_text, format_pitch(snap.pitch_degrees))
        _set_text(el.roll_text, format_roll(snap.roll_degrees))
        _set_text(el.vertical_speed_text, format_vertical_speed(snap.vertical_speed))

        if el.gps_text is not None:
            if snap.geographic_mapping:
                el.gps_text.text = format_geographic(snap.latitude, snap.longitude)
            else:
                el.gps_text.text = format_world_position(snap.world_position)

    def _write_gauges(self, snap: InstrumentSnapshot) -> None:
        el = self.elements

        vehicle = self.vehicle if self.vehicle is not None else self.provider.vehicle
        self._note_vehicle(vehicle is not None)
        # Without a vehicle the throttle gauge keeps its last reading.
        # Host values may be numpy scalars; coerce before the gauge math.
        if vehicle is not None:
            throttle = clamp01(float(vehicle.throttle))
            _set_fill(el.throttle_fill, throttle)
            _set_text(el.throttle_text, format_percent(throttle))

        fuel = clamp01(float(self.fuel_fraction))
        _set_fill(el.fuel_fill, fuel)
        _set_text(el.fuel_text, format_percent(fuel))

        _set_fill(el.vsi_fill, vsi_fill(snap.vertical_speed, self.settings.vsi_range))
        _set_text(el.vsi_text, format_signed(snap.vertical_speed))

    def _write_horizon(self) -> None:
        el = self.elements
        # Horizon turns opposite to the aircraft
        if el.horizon_roll_layer is not None:
            el.horizon_roll_layer.rotation = -self._state.smoothed_roll
        # Nose up moves the horizon down the screen
        if el.horizon_pitch_layer is not None:
            x, _ = el.horizon_pitch_layer.anchored_position
            y = -self._state.smoothed_pitch * self.settings.pitch_pixels_per_degree
            el.horizon_pitch_layer.anchored_position = (x, y)

    def _note_vehicle(self, present: bool) -> None:
        if present == self._had_vehicle:
            return
        if present:
            logger.info("Vehicle bound; throttle gauge live")
        elif self._had_vehicle is not None:
            logger.info("Vehicle lost; throttle gauge holding last value")
        self._had_vehicle = present


def _set_text(element: TextElement | None, text: str) -> None:
    if element is not None:
        element.text = text


def _set_fill(element: FillElement | None, amount: float) -> None:
    if element is not None:
        element.fill_amount = amount
