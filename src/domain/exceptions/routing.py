from __future__ import annotations


class RoutingError(Exception):
    """Base exception for route lookup failures."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class TransportError(RoutingError):
    """The request could not be sent or the response could not be retrieved."""


class ParseError(RoutingError):
    """The response body is not valid JSON or lacks the expected fields."""
