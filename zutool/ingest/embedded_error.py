"""Detect error payloads hidden inside transport-successful responses."""

import json

from zutool.ingest.errors import EmbeddedApiError


def body_text(body: bytes | str) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def classify_embedded_error(body: bytes | str) -> tuple[bool, str]:
    """Return (is_error, message) for a response body.

    Only a JSON object with a non-empty string error_message counts.
    An error_code without a message is not an error.
    """
    try:
        payload = json.loads(body_text(body))
    except ValueError:
        return False, ""
    if not isinstance(payload, dict):
        return False, ""
    message = payload.get("error_message")
    if isinstance(message, str) and message:
        return True, message
    return False, ""


def raise_for_embedded_error(body: bytes | str, status_code: int = 200) -> None:
    is_error, message = classify_embedded_error(body)
    if is_error:
        raise EmbeddedApiError(status_code, body_text(body), message)
