"""Decode the Otenki ASP getElements payload into Elements.

The feed encodes each forecast metric as a list of records. The first
record is a header ``[content_id, title, ...]`` and every following
record is a data point ``[timestamp, value, ...]``. Decoding is best
effort: malformed items and records are logged and skipped.
"""

import json
import logging
from datetime import datetime
from typing import Any

from zutool.ingest.coercion import CoercionError, coerce_scalar, parse_instant
from zutool.ingest.embedded_error import body_text, raise_for_embedded_error
from zutool.ingest.errors import DecodeError
from zutool.models.common import TypedScalar
from zutool.models.forecast import Element, OtenkiForecast

logger = logging.getLogger(__name__)


def decode_otenki_forecast(body: bytes | str) -> OtenkiForecast:
    """Decode a raw getElements response body.

    Raises EmbeddedApiError if the body is an error payload and
    DecodeError if it is not a JSON object.
    """
    raise_for_embedded_error(body)

    text = body_text(body)
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise DecodeError(
            f"failed to decode otenki asp response: {e}", body=text
        ) from e
    if not isinstance(raw, dict):
        raise DecodeError("otenki asp response is not an object", body=text)

    head = raw.get("head") or {}
    if not isinstance(head, dict):
        raise DecodeError("otenki asp head is not an object", body=text)

    items = _element_items(raw.get("body"), text)
    elements = []
    for index, item in enumerate(items):
        element = decode_element(item, index)
        if element is not None:
            elements.append(element)

    date_time = head.get("dateTime")
    return OtenkiForecast(
        status=str(head.get("status", "")),
        date_time=parse_instant(date_time) if date_time else None,
        elements=elements,
    )


def _element_items(body: Any, text: str) -> list:
    if body is None:
        return []
    if not isinstance(body, dict):
        raise DecodeError("otenki asp body is not an object", body=text)
    location = body.get("location") or {}
    if not isinstance(location, dict):
        raise DecodeError("otenki asp location is not an object", body=text)
    items = location.get("element") or []
    if not isinstance(items, list):
        raise DecodeError("otenki asp element is not a list", body=text)
    return items


def _properties(record: Any) -> list | None:
    if not isinstance(record, dict):
        return None
    props = record.get("property")
    return props if isinstance(props, list) else None


def decode_element(item: Any, index: int = 0) -> Element | None:
    """Decode one header+data item. Returns None if the header is unusable."""
    records = item.get("record") if isinstance(item, dict) else None
    if not isinstance(records, list) or not records:
        logger.warning("Skipping element #%d: no records", index)
        return None

    header = _properties(records[0])
    if header is None or len(header) < 2:
        logger.warning(
            "Skipping element #%d: header needs content id and title, got %r",
            index, header,
        )
        return None
    content_id, title = header[0], header[1]
    if not isinstance(content_id, str) or not isinstance(title, str):
        logger.warning(
            "Skipping element #%d: non-text content id or title %r",
            index, header[:2],
        )
        return None

    series: dict[datetime, TypedScalar] = {}
    for record in records[1:]:
        point = _decode_data_point(record, content_id)
        if point is not None:
            instant, value = point
            series[instant] = value

    return Element(content_id=content_id, title=title, series=series)


def _decode_data_point(
    record: Any, content_id: str
) -> tuple[datetime, TypedScalar] | None:
    props = _properties(record)
    if props is None or len(props) < 2:
        logger.warning(
            "Skipping %s record: need timestamp and value, got %r",
            content_id, props,
        )
        return None

    instant = parse_instant(props[0])
    if instant is None:
        logger.warning(
            "Skipping %s record: unparseable timestamp %r", content_id, props[0]
        )
        return None

    try:
        value = coerce_scalar(props[1])
    except CoercionError as e:
        logger.warning("Skipping %s record at %s: %s", content_id, props[0], e)
        return None
    return instant, value
