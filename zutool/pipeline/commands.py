"""Command runners: resolve arguments, fetch once, render, write."""

import logging
from collections.abc import Callable, Iterable

from zutool.config.defaults import AREA_CODE_MAP, CONFIRMED_OTENKI_CITIES
from zutool.ingest.errors import CommandError, NotFoundError
from zutool.ingest.zutool_client import ZutoolClient
from zutool.models.common import DayKey, OutputFormat
from zutool.reporting.date_index import available_instants, select_by_offsets
from zutool.reporting.formatters import (
    format_otenki_text,
    format_pain_status_text,
    format_weather_points_text,
    format_weather_status_text,
    to_json,
)
from zutool.reporting.window_renderer import render_day

logger = logging.getLogger(__name__)

Writer = Callable[[str], None]

WEATHER_STATUS_OFFSETS = range(-1, 3)
OTENKI_OFFSETS = range(0, 7)


def resolve_area_code(area: str) -> str:
    """Accept a two-digit prefecture code or a prefecture name."""
    if len(area) == 2 and area.isdigit():
        return area
    code = AREA_CODE_MAP.get(area)
    if code is None:
        raise CommandError(f"Unknown area code or name: {area}")
    return code


def resolve_otenki_city(city: str) -> tuple[str, str]:
    """Return (code, name) for a confirmed Otenki ASP city code or name."""
    if city in CONFIRMED_OTENKI_CITIES:
        return city, CONFIRMED_OTENKI_CITIES[city]
    for code, name in CONFIRMED_OTENKI_CITIES.items():
        if name == city:
            return code, name
    supported = sorted([*CONFIRMED_OTENKI_CITIES, *CONFIRMED_OTENKI_CITIES.values()])
    raise CommandError(
        f"Unknown city code or name: {city} (supported: {', '.join(supported)})"
    )


def validate_offsets(offsets: Iterable[int], allowed: range) -> list[int]:
    """Sorted, de-duplicated offsets; raises CommandError on any out of range."""
    result = sorted(set(offsets))
    for n in result:
        if n not in allowed:
            raise CommandError(
                f"Invalid day offset: {n} (must be between "
                f"{allowed.start} and {allowed.stop - 1})"
            )
    return result


def run_pain_status(
    client: ZutoolClient,
    area: str,
    set_weather_point: str | None,
    fmt: OutputFormat,
    write: Writer,
    indent: int = 4,
) -> None:
    area_code = resolve_area_code(area)
    status = client.get_pain_status(area_code, set_weather_point)
    if fmt == OutputFormat.JSON:
        write(to_json(status, indent))
    else:
        write(format_pain_status_text(status))


def run_weather_point(
    client: ZutoolClient,
    keyword: str,
    kata: bool,
    fmt: OutputFormat,
    write: Writer,
    indent: int = 4,
) -> None:
    try:
        points = client.get_weather_point(keyword)
    except NotFoundError as e:
        logger.debug("Weather point search for %r returned 404: %s", keyword, e)
        points = []
    if fmt == OutputFormat.JSON:
        write(to_json(points, indent))
    else:
        write(format_weather_points_text(points, keyword, kata))


def run_weather_status(
    client: ZutoolClient,
    city_code: str,
    offsets: Iterable[int],
    fmt: OutputFormat,
    write: Writer,
    indent: int = 4,
) -> None:
    days = validate_offsets(offsets, WEATHER_STATUS_OFFSETS)
    status = client.get_weather_status(city_code)
    if fmt == OutputFormat.JSON:
        write(to_json(status, indent))
        return

    for n in days:
        key = DayKey.from_offset(n)
        samples = status.day(key)
        windows = render_day(samples, n)
        write(format_weather_status_text(status, key.value, n, windows, len(samples)))


def run_otenki(
    client: ZutoolClient,
    city: str,
    offsets: Iterable[int],
    fmt: OutputFormat,
    write: Writer,
    indent: int = 4,
) -> None:
    city_code, city_name = resolve_otenki_city(city)
    wanted = validate_offsets(offsets, OTENKI_OFFSETS)
    forecast = client.get_otenki_forecast(city_code)
    if fmt == OutputFormat.JSON:
        write(to_json(forecast, indent))
        return

    instants = available_instants(forecast.elements)
    if not instants:
        write("利用可能な日付データがありません。")
        return
    dates = select_by_offsets(instants, wanted)
    if len(dates) < len(wanted):
        logger.info(
            "Only %d of %d requested days are available", len(dates), len(wanted)
        )
    write(format_otenki_text(forecast, dates, city_name, city_code))
