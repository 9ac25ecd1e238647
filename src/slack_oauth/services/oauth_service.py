"""
OAuth Service - Handles Slack OAuth authorization code exchange
"""
import json
from typing import Optional

import httpx
from pydantic import ValidationError

from ..core.config import settings
from ..core.exceptions import (
    ApiLogicalError,
    DecodeError,
    MalformedResponseError,
    TransportError,
)
from ..core.logging import get_logger
from ..models.schemas import AccessResponse, ResponseEnvelope

logger = get_logger(__name__)


class OAuthService:
    """Service for Slack OAuth operations"""

    def __init__(self, token_url: Optional[str] = None):
        self.token_url = token_url or settings.SLACK_OAUTH_ACCESS_URL

    def build_access_url(
        self,
        client_id: str,
        client_secret: str,
        code: str,
        redirect_uri: Optional[str] = None,
    ) -> str:
        """
        Build the oauth.access request URL

        The redirect_uri parameter is left out entirely when not given.
        """
        params = {
            "client_id": client_id,
            "client_secret": client_secret,
            "code": code,
        }
        if redirect_uri is not None:
            params["redirect_uri"] = redirect_uri

        return str(httpx.URL(self.token_url, params=params))

    def exchange_code_for_token(
        self,
        client: httpx.Client,
        client_id: str,
        client_secret: str,
        code: str,
        redirect_uri: Optional[str] = None,
    ) -> AccessResponse:
        """
        Exchange a temporary authorization code for an API access token

        Args:
            client: HTTP client owned by the caller
            client_id: Slack app client ID
            client_secret: Slack app client secret
            code: Authorization code from the OAuth callback
            redirect_uri: Redirect URI used in authorization, if any

        Returns:
            The issued access token and its scope

        Raises:
            TransportError: If the request or the body read fails
            MalformedResponseError: If the body is not a JSON object
            ApiLogicalError: If Slack reports failure
            DecodeError: If the token fields are missing or mistyped
        """
        url = self.build_access_url(client_id, client_secret, code, redirect_uri)

        logger.info(f"Exchanging authorization code for token (client_id: {client_id[:20]}...)")

        if getattr(client, "is_closed", False):
            raise TransportError("oauth.access request not sent: the HTTP client is closed")

        try:
            response = client.get(url)
            response.read()
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise TransportError(f"oauth.access request failed: {e}") from e

        access = self.parse_access_response(response.text)

        logger.info("Successfully exchanged code for token")
        return access

    @staticmethod
    def parse_access_response(body: str) -> AccessResponse:
        """
        Validate and decode an oauth.access response body

        Checks run in order: JSON object, then the ok flag, then the
        token fields.
        """
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise MalformedResponseError(f"bad slack json response: {e}", body) from e

        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"bad slack json response (not an object): {payload!r}", body
            )

        try:
            envelope = ResponseEnvelope.model_validate(payload)
        except ValidationError as e:
            raise ApiLogicalError(
                f'slack json response "ok" is not a boolean: {payload!r}', payload
            ) from e

        if not envelope.ok:
            raise ApiLogicalError(f'slack json response "ok" is not true: {payload!r}', payload)

        try:
            return AccessResponse.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"unexpected oauth.access response shape: {e}", payload) from e


# Create singleton instance
oauth_service = OAuthService()


def exchange(
    client: httpx.Client,
    client_id: str,
    client_secret: str,
    code: str,
    redirect_uri: Optional[str] = None,
) -> AccessResponse:
    """Exchange an authorization code using the default oauth.access endpoint"""
    return oauth_service.exchange_code_for_token(
        client, client_id, client_secret, code, redirect_uri
    )
