#!/usr/bin/env python
"""Example: Fly a scripted climbing turn and print the HUD each second.

The loop follows the frame-driven pattern a host engine uses:
1. Step the body (the flight model in a real host)
2. Tick the display (provider snapshot -> smoothing -> elements)
3. Render the elements (printed here)

Usage:
    uv run python scripts/hud_demo.py
"""

import logging

import numpy as np

from cockpit import (
    DisplayElements,
    FillGauge,
    GeoOrigin,
    HorizonLayer,
    HudSettings,
    InstrumentDataProvider,
    InstrumentDisplay,
    KinematicBody,
    TextLabel,
)


def build_panel() -> DisplayElements:
    """Bind a headless element to every readout."""
    return DisplayElements(
        speed_text=TextLabel(),
        altitude_text=TextLabel(),
        heading_text=TextLabel(),
        pitch_text=TextLabel(),
        roll_text=TextLabel(),
        vertical_speed_text=TextLabel(),
        gps_text=TextLabel(),
        throttle_fill=FillGauge(),
        throttle_text=TextLabel(),
        fuel_fill=FillGauge(),
        fuel_text=TextLabel(),
        vsi_fill=FillGauge(),
        vsi_text=TextLabel(),
        horizon_roll_layer=HorizonLayer(),
        horizon_pitch_layer=HorizonLayer(),
    )


def render(panel: DisplayElements, time: float) -> str:
    gps = panel.gps_text.text.replace("\n", " ")
    return (
        f"t={time:5.1f}s | {panel.speed_text.text} | {panel.altitude_text.text} | "
        f"{panel.heading_text.text} | {panel.pitch_text.text} | {panel.roll_text.text} | "
        f"{panel.vertical_speed_text.text} | THR {panel.throttle_text.text} | "
        f"FUEL {panel.fuel_text.text} | VSI {panel.vsi_fill.fill_amount:.2f} | "
        f"HZN {panel.horizon_roll_layer.rotation:+6.1f}deg "
        f"{panel.horizon_pitch_layer.anchored_position[1]:+6.1f}px | {gps}"
    )


def run_demo():
    """Climbing right turn out of Paris."""
    print("=" * 60)
    print("HUD DEMO - CLIMBING TURN")
    print("=" * 60)

    # =========================================================================
    # Setup
    # =========================================================================
    DT = 1.0 / 30.0          # Frame time [s]
    DURATION = 20.0          # [s]
    FUEL_BURN = 0.002        # Fuel fraction per second

    settings = HudSettings(
        geo=GeoOrigin(enable_geographic_mapping=True),
        smooth_factor=0.15,
    )

    body = KinematicBody(
        position=np.array([0.0, 1500.0, 0.0]),
        airspeed=61.73,
        heading_deg=45.0,
        pitch_deg=5.2,
        wind=np.array([-4.0, 0.0, 0.0]),  # 4 m/s wind from the east
        throttle=0.75,
        roll_rate_deg=1.5,
        turn_rate_deg=3.0,
    )

    provider = InstrumentDataProvider(body=body, vehicle=body, settings=settings)
    panel = build_panel()
    display = InstrumentDisplay(provider=provider, elements=panel)

    # =========================================================================
    # Frame loop
    # =========================================================================
    frames_per_second = round(1.0 / DT)
    n_frames = round(DURATION / DT)
    for frame in range(n_frames + 1):
        display.tick()
        if frame % frames_per_second == 0:
            print(render(panel, body.time))

        body.advance(DT)
        display.fuel_fraction = max(display.fuel_fraction - FUEL_BURN * DT, 0.0)
        if body.roll_deg >= 25.0:
            body.roll_rate_deg = 0.0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo()
