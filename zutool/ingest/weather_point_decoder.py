"""Decode /getweatherpoint, whose result field is a JSON array encoded as a string."""

import json
import logging
from typing import Any

from zutool.ingest.embedded_error import body_text, raise_for_embedded_error
from zutool.ingest.errors import DecodeError
from zutool.models.forecast import WeatherPoint

logger = logging.getLogger(__name__)

EMPTY_RESULT = "[]"


def decode_weather_points(body: bytes | str) -> list[WeatherPoint]:
    """Decode the outer envelope, then the inner result string.

    ``{"result": "[]"}`` and ``{"result": "null"}`` are zero points, never
    an error.
    """
    raise_for_embedded_error(body)

    text = body_text(body)
    try:
        envelope = json.loads(text)
    except ValueError as e:
        raise DecodeError(
            f"failed to decode /getweatherpoint response: {e}", body=text
        ) from e
    if not isinstance(envelope, dict) or not isinstance(envelope.get("result"), str):
        raise DecodeError(
            "/getweatherpoint response has no result string", body=text
        )

    result = envelope["result"]
    if result.strip() == EMPTY_RESULT:
        return []

    try:
        items = json.loads(result)
    except ValueError as e:
        raise DecodeError(
            f"failed to decode nested result for /getweatherpoint: {e}",
            body=text,
            fragment=result,
        ) from e
    if items is None:
        return []
    if not isinstance(items, list):
        raise DecodeError(
            "nested result for /getweatherpoint is not an array",
            body=text,
            fragment=result,
        )

    points = [_decode_point(item, text) for item in items]
    for point in points:
        try:
            point.validate()
        except ValueError as e:
            logger.warning("Weather point %s looks malformed: %s", point.name, e)
    return points


def _decode_point(item: Any, text: str) -> WeatherPoint:
    if not isinstance(item, dict):
        raise DecodeError(
            "weather point is not an object",
            body=text,
            fragment=json.dumps(item, ensure_ascii=False),
        )
    fields = {}
    for key in ("city_code", "name_kata", "name"):
        value = item.get(key, "")
        if not isinstance(value, str):
            raise DecodeError(
                f"weather point field {key} is not text",
                body=text,
                fragment=json.dumps(item, ensure_ascii=False),
            )
        fields[key] = value
    return WeatherPoint(**fields)
