"""Decode /getweatherstatus and /getpainstatus responses."""

import json
import logging
from typing import Any

from zutool.ingest.coercion import parse_instant, to_number
from zutool.ingest.embedded_error import body_text, raise_for_embedded_error
from zutool.ingest.errors import DecodeError
from zutool.models.common import DayKey
from zutool.models.forecast import HourlySample, PainStatus, PressureLevel, WeatherStatus

logger = logging.getLogger(__name__)

_PRESSURE_LEVELS = {level.value for level in PressureLevel}


def _load_object(body: bytes | str, endpoint: str) -> tuple[dict, str]:
    raise_for_embedded_error(body)
    text = body_text(body)
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise DecodeError(f"failed to decode {endpoint} response: {e}", body=text) from e
    if not isinstance(raw, dict):
        raise DecodeError(f"{endpoint} response is not an object", body=text)
    return raw, text


def decode_weather_status(body: bytes | str) -> WeatherStatus:
    raw, text = _load_object(body, "/getweatherstatus")

    days = {}
    for key in DayKey:
        entries = raw.get(key.value) or []
        if not isinstance(entries, list):
            raise DecodeError(f"{key.value} is not a list", body=text)
        days[key] = [_decode_sample(entry, key, text) for entry in entries]

    date_time = raw.get("dateTime")
    return WeatherStatus(
        place_name=str(raw.get("place_name", "")),
        place_id=str(raw.get("place_id", "")),
        prefecture_id=str(raw.get("prefectures_id", "")),
        date_time=parse_instant(date_time) if date_time else None,
        yesterday=days[DayKey.YESTERDAY],
        today=days[DayKey.TODAY],
        tomorrow=days[DayKey.TOMORROW],
        day_after_tomorrow=days[DayKey.DAY_AFTER_TOMORROW],
    )


def _decode_sample(entry: Any, key: DayKey, text: str) -> HourlySample:
    if not isinstance(entry, dict):
        raise DecodeError(f"{key.value} entry is not an object", body=text)

    hour = str(entry.get("time", ""))
    temp_raw = entry.get("temp")
    temperature = to_number(temp_raw)
    temperature_invalid = temp_raw is not None and temperature is None
    if temperature_invalid:
        logger.warning("%s %sh: temperature %r is not numeric", key.value, hour, temp_raw)

    pressure_raw = entry.get("pressure")
    pressure = to_number(pressure_raw)
    if pressure is None:
        logger.warning("%s %sh: pressure %r is not numeric", key.value, hour, pressure_raw)

    level = str(entry.get("pressure_level", ""))
    if level not in _PRESSURE_LEVELS:
        logger.warning("%s %sh: unknown pressure level %r", key.value, hour, level)

    return HourlySample(
        hour_label=hour,
        weather_code=str(entry.get("weather", "")),
        temperature=temperature,
        pressure=pressure,
        pressure_level=level,
        temperature_invalid=temperature_invalid,
    )


def decode_pain_status(body: bytes | str) -> PainStatus:
    raw, text = _load_object(body, "/getpainstatus")
    status = raw.get("painnoterate_status")
    if not isinstance(status, dict):
        raise DecodeError("/getpainstatus response has no painnoterate_status", body=text)

    rates = []
    for field_name in ("rate_0", "rate_1", "rate_2", "rate_3"):
        rate = to_number(status.get(field_name, 0))
        if rate is None or rate < 0:
            raise DecodeError(
                f"{field_name} must be a non-negative number, got {status.get(field_name)!r}",
                body=text,
            )
        rates.append(rate)

    return PainStatus(
        area_name=str(status.get("area_name", "")),
        time_start=str(status.get("time_start", "")),
        time_end=str(status.get("time_end", "")),
        rate_normal=rates[0],
        rate_little=rates[1],
        rate_painful=rates[2],
        rate_bad=rates[3],
    )
