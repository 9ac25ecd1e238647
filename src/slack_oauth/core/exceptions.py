"""
Errors raised by the Slack OAuth code exchange
"""
from typing import Any, Dict, Optional


class ExchangeError(Exception):
    """Base class for every failure of an OAuth code exchange"""


class TransportError(ExchangeError):
    """The request could not be sent or the response body could not be read"""


class MalformedResponseError(ExchangeError):
    """The response body is not JSON, or its top-level value is not an object"""

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body


class ApiLogicalError(ExchangeError):
    """
    Slack answered with well-formed JSON but reported failure

    Raised when ``ok`` is false or is present with a non-boolean value.
    The parsed response object is kept in ``payload``.
    """

    def __init__(self, message: str, payload: Dict[str, Any]):
        super().__init__(message)
        self.payload = payload

    @property
    def error(self) -> Optional[str]:
        """Slack's ``error`` code, when the response carries one"""
        error = self.payload.get("error")
        return error if isinstance(error, str) else None


class DecodeError(ExchangeError):
    """A successful response did not have the expected access token shape"""

    def __init__(self, message: str, payload: Dict[str, Any]):
        super().__init__(message)
        self.payload = payload
