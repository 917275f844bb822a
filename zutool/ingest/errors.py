"""Error taxonomy for upstream calls and response decoding."""


class ZutoolError(Exception):
    """Base class for all fatal errors surfaced to the CLI."""


class ApiError(ZutoolError):
    """The upstream answered (or failed to answer) with an error.

    status_code is None when no HTTP response was received.
    """

    def __init__(
        self,
        status_code: int | None,
        body: str = "",
        message: str = "",
    ):
        self.status_code = status_code
        self.body = body
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return f"API error: {self.message} (status: {self.status_code})"
        return f"API error (status: {self.status_code}): {self.body}"


class TransportError(ApiError):
    """Network failure or non-2xx status."""


class NotFoundError(TransportError):
    """The upstream returned 404."""


class EmbeddedApiError(ApiError):
    """Transport succeeded but the body carries error_code/error_message."""


class DecodeError(ZutoolError):
    """Body is not JSON or does not match any expected shape."""

    def __init__(self, message: str, body: str = "", fragment: str = ""):
        self.body = body
        self.fragment = fragment
        if fragment:
            detail = f"{message}, fragment: {fragment}"
        elif body:
            detail = f"{message}, body: {body}"
        else:
            detail = message
        super().__init__(detail)


class CommandError(ZutoolError):
    """Invalid command arguments, raised before any request is made."""
