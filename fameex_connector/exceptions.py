"""
Domain exceptions for the FameEX connector.

Rejected requests surface as FameexRequestError carrying the composed
diagnostic string, so callers can catch a single type regardless of whether
the transport, the HTTP layer or response processing failed.
"""


class FameexError(Exception):
    """Base connector error."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FameexRequestError(FameexError):
    """A request was rejected (transport, non-200 HTTP, or unprocessable body)."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class ConfigurationError(FameexError):
    """Invalid connector configuration."""

    def __init__(self, message: str = "Invalid FameEX configuration"):
        super().__init__(message)
