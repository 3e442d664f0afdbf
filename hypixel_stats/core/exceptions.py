"""Error hierarchy for the Hypixel client."""
from __future__ import annotations

from typing import Any, Dict, Optional


class HypixelError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(HypixelError):
    """Missing or malformed API keys."""


class EmptyResponseError(HypixelError):
    """The transport returned no body."""

    def __init__(self, endpoint: Optional[str] = None) -> None:
        super().__init__("No response body", {"endpoint": endpoint})
        self.endpoint = endpoint


class InvalidResponseError(HypixelError):
    """The body could not be parsed as JSON."""

    def __init__(self, endpoint: Optional[str] = None) -> None:
        super().__init__("Request returned invalid json", {"endpoint": endpoint})
        self.endpoint = endpoint


class ApiRequestError(HypixelError):
    """Non-2xx HTTP status from the API.

    The parsed body, when there is one, is kept on ``envelope`` so callers
    can read the API's own ``cause``.
    """

    def __init__(
        self,
        status_code: int,
        endpoint: Optional[str] = None,
        envelope: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            f"HTTP {status_code} for /{endpoint}",
            {"status_code": status_code, "endpoint": endpoint},
        )
        self.status_code = status_code
        self.endpoint = endpoint
        self.envelope = envelope

    @property
    def cause(self) -> Optional[str]:
        if isinstance(self.envelope, dict):
            return self.envelope.get("cause")
        return None


class RequestFailedError(HypixelError):
    """The request raised something other than a transport error.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, endpoint: Optional[str] = None) -> None:
        super().__init__("Request failed", {"endpoint": endpoint})
        self.endpoint = endpoint
