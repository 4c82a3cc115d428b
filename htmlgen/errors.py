"""Custom exceptions for htmlgen."""


class HtmlgenError(Exception):
    """Base exception for htmlgen operations."""


class WriteError(HtmlgenError):
    """The output sink rejected a write during rendering.

    ``bytes_written`` is the count accepted by the sink before the failure.
    """

    def __init__(self, message: str, bytes_written: int) -> None:
        super().__init__(message)
        self.bytes_written = bytes_written


class NotFoundError(HtmlgenError, LookupError):
    """A uniquely-marked child could not be found."""


class ChildNotAllowedError(HtmlgenError, TypeError):
    """A child was added to a self-closing element."""


class ConfigError(HtmlgenError):
    """Render configuration could not be loaded or validated."""
