"""
Slack OAuth client - exchanges authorization codes for API access tokens
"""
from .core.exceptions import (
    ApiLogicalError,
    DecodeError,
    ExchangeError,
    MalformedResponseError,
    TransportError,
)
from .models.schemas import AccessResponse
from .services.oauth_service import OAuthService, exchange, oauth_service

__all__ = [
    "AccessResponse",
    "ApiLogicalError",
    "DecodeError",
    "ExchangeError",
    "MalformedResponseError",
    "OAuthService",
    "TransportError",
    "exchange",
    "oauth_service",
]
