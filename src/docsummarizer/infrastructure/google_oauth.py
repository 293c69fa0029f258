"""Google OAuth2 client for the authorization-code sign-in flow."""

import logging
from typing import Any
from urllib.parse import urlencode

import aiohttp
from aiohttp import ClientTimeout

from docsummarizer.config import get_settings
from docsummarizer.domain.errors import OAuthProviderError

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"


class GoogleOAuthClient:
    """Async client for Google's OAuth2 and OpenID Connect endpoints."""

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
        timeout_seconds: int = 15,
    ) -> None:
        """Initialize the client.

        Args:
            client_id: OAuth client ID (defaults to config)
            client_secret: OAuth client secret (defaults to config)
            redirect_uri: Registered callback URL (defaults to config)
            timeout_seconds: Request timeout in seconds
        """
        settings = get_settings()
        self.client_id = client_id or settings.google_client_id
        self.client_secret = client_secret or settings.google_client_secret
        self.redirect_uri = redirect_uri or settings.google_redirect_uri
        self.timeout = ClientTimeout(total=timeout_seconds)

    def authorization_url(self, state: str) -> str:
        """Build the consent screen URL for a given CSRF state."""
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": "openid email profile",
            "state": state,
            "prompt": "select_account",
        }
        return f"{AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> dict[str, Any]:
        """Exchange an authorization code for tokens."""
        data = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "grant_type": "authorization_code",
        }
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            try:
                async with session.post(TOKEN_URL, data=data) as response:
                    payload = await response.json()
                    if response.status != 200 or "access_token" not in payload:
                        error = payload.get("error", response.status)
                        logger.error(f"Google token exchange failed: {error}")
                        raise OAuthProviderError("Token exchange failed")
                    return payload
            except (aiohttp.ClientError, TimeoutError) as e:
                logger.error(f"Google token endpoint unreachable: {e}")
                raise OAuthProviderError("Token exchange failed") from e

    async def fetch_userinfo(self, access_token: str) -> dict[str, Any]:
        """Fetch the signed-in user's profile."""
        headers = {"Authorization": f"Bearer {access_token}"}
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            try:
                async with session.get(USERINFO_URL, headers=headers) as response:
                    if response.status != 200:
                        logger.error(f"Google userinfo returned HTTP {response.status}")
                        raise OAuthProviderError("Failed to fetch user profile")
                    profile = await response.json()
            except (aiohttp.ClientError, TimeoutError) as e:
                logger.error(f"Google userinfo endpoint unreachable: {e}")
                raise OAuthProviderError("Failed to fetch user profile") from e

        if not profile.get("email"):
            raise OAuthProviderError("Google profile has no email")
        return profile
