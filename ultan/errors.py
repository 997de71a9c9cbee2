"""Exceptions raised by the library."""


class UltanError(Exception):
    """Base class for library errors."""


class HttpError(UltanError):
    """Non-success HTTP response returned to ``req_flow``."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
