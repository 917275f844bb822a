"""Split an hourly day series into 12-hour windows with pressure trends.

The last valid pressure of one window is carried into the next so the
first arrow of the afternoon window compares against the morning.
"""

import logging

from zutool.config.defaults import UNKNOWN_SYMBOL, WEATHER_SYMBOLS
from zutool.models.forecast import HourlySample, RenderWindow, Trend

logger = logging.getLogger(__name__)

WINDOW_HOURS = 12


def weather_symbol(code: str) -> str:
    """Map a weather code to its category symbol by hundreds digit."""
    try:
        simplified = (int(code) // 100) * 100
    except (TypeError, ValueError):
        return UNKNOWN_SYMBOL
    return WEATHER_SYMBOLS.get(simplified, UNKNOWN_SYMBOL)


def compute_trends(
    pressures: list[float | None], carry_in: float | None
) -> tuple[list[Trend], float | None]:
    """Trend per reading against the previous valid reading.

    A missing carry_in makes the first reading STEADY. Non-numeric
    readings are UNKNOWN and leave the carried value untouched.
    """
    trends = []
    last = carry_in
    for pressure in pressures:
        if pressure is None:
            trends.append(Trend.UNKNOWN)
            continue
        if last is None or pressure == last:
            trends.append(Trend.STEADY)
        elif pressure > last:
            trends.append(Trend.RISING)
        else:
            trends.append(Trend.FALLING)
        last = pressure
    return trends, last


def render_window(
    samples: list[HourlySample], start_hour: int, carry_in: float | None
) -> RenderWindow:
    samples = samples[:WINDOW_HOURS]
    trends, carry_out = compute_trends([s.pressure for s in samples], carry_in)
    return RenderWindow(
        start_hour=start_hour,
        hours=[str(start_hour + i) for i in range(len(samples))],
        weather=[weather_symbol(s.weather_code) for s in samples],
        temperatures=[_format_temperature(s) for s in samples],
        trends=trends,
        pressures=[
            UNKNOWN_SYMBOL if s.pressure is None else f"{s.pressure:.1f}"
            for s in samples
        ],
        pressure_levels=[s.pressure_level for s in samples],
        carry_out=carry_out,
    )


def render_day(samples: list[HourlySample], day_offset: int) -> list[RenderWindow]:
    """Render up to two windows: hours 0-11 and, with >12 samples, 12-23."""
    if not samples:
        return []
    if len(samples) < 24:
        logger.debug(
            "Day offset %d has %d samples, expected 24", day_offset, len(samples)
        )
    first = render_window(samples[:WINDOW_HOURS], 0, None)
    windows = [first]
    if len(samples) > WINDOW_HOURS:
        windows.append(
            render_window(
                samples[WINDOW_HOURS:2 * WINDOW_HOURS], WINDOW_HOURS, first.carry_out
            )
        )
    return windows


def _format_temperature(sample: HourlySample) -> str:
    if sample.temperature_invalid:
        return f"{UNKNOWN_SYMBOL}℃"
    if sample.temperature is None:
        return "-℃"
    return f"{sample.temperature:.1f}℃"
