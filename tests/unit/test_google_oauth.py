"""Tests for GoogleOAuthClient: consent URL, token exchange, profile fetch."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import parse_qs, urlparse

import aiohttp
import pytest

from docsummarizer.domain.errors import OAuthProviderError
from docsummarizer.infrastructure.google_oauth import AUTHORIZE_URL, GoogleOAuthClient


def _make_mock_response(status=200, json_data=None):
    """Create a mock aiohttp response."""
    resp = MagicMock()
    resp.status = status
    resp.json = AsyncMock(return_value=json_data)
    return resp


def _patch_session(response=None, side_effect=None):
    """Patch aiohttp.ClientSession so get/post yield the given response or raise."""

    @asynccontextmanager
    async def _request(*args, **kwargs):
        if side_effect is not None:
            raise side_effect
        yield response

    mock_session = MagicMock()
    mock_session.get = MagicMock(side_effect=_request)
    mock_session.post = MagicMock(side_effect=_request)

    @asynccontextmanager
    async def _client_session(*args, **kwargs):
        yield mock_session

    return (
        patch(
            "docsummarizer.infrastructure.google_oauth.aiohttp.ClientSession",
            side_effect=_client_session,
        ),
        mock_session,
    )


def _make_client() -> GoogleOAuthClient:
    return GoogleOAuthClient(
        client_id="cid",
        client_secret="csecret",
        redirect_uri="http://localhost/cb",
    )


class TestAuthorizationUrl:
    """Tests for the consent screen URL."""

    def test_contains_client_and_state(self):
        url = _make_client().authorization_url("xyz")

        assert url.startswith(AUTHORIZE_URL)
        query = parse_qs(urlparse(url).query)
        assert query["client_id"] == ["cid"]
        assert query["redirect_uri"] == ["http://localhost/cb"]
        assert query["state"] == ["xyz"]
        assert query["response_type"] == ["code"]
        assert query["scope"] == ["openid email profile"]


class TestExchangeCode:
    """Tests for exchange_code."""

    async def test_success(self):
        patcher, mock_session = _patch_session(
            _make_mock_response(json_data={"access_token": "at", "id_token": "it"})
        )
        with patcher:
            tokens = await _make_client().exchange_code("the-code")

        assert tokens["access_token"] == "at"
        data = mock_session.post.call_args.kwargs["data"]
        assert data["code"] == "the-code"
        assert data["grant_type"] == "authorization_code"

    async def test_error_response(self):
        patcher, _ = _patch_session(
            _make_mock_response(status=400, json_data={"error": "invalid_grant"})
        )
        with patcher, pytest.raises(OAuthProviderError, match="Token exchange failed"):
            await _make_client().exchange_code("bad")

    async def test_network_failure(self):
        patcher, _ = _patch_session(side_effect=aiohttp.ClientError("down"))
        with patcher, pytest.raises(OAuthProviderError) as exc_info:
            await _make_client().exchange_code("code")

        assert isinstance(exc_info.value.__cause__, aiohttp.ClientError)


class TestFetchUserinfo:
    """Tests for fetch_userinfo."""

    async def test_success_sends_bearer(self):
        patcher, mock_session = _patch_session(
            _make_mock_response(json_data={"email": "j@example.com", "name": "J"})
        )
        with patcher:
            profile = await _make_client().fetch_userinfo("at")

        assert profile["email"] == "j@example.com"
        headers = mock_session.get.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer at"

    async def test_http_error(self):
        patcher, _ = _patch_session(_make_mock_response(status=401))
        with patcher, pytest.raises(OAuthProviderError):
            await _make_client().fetch_userinfo("expired")

    async def test_profile_without_email(self):
        patcher, _ = _patch_session(_make_mock_response(json_data={"name": "No Email"}))
        with patcher, pytest.raises(OAuthProviderError, match="no email"):
            await _make_client().fetch_userinfo("at")

    async def test_timeout(self):
        patcher, _ = _patch_session(side_effect=TimeoutError())
        with patcher, pytest.raises(OAuthProviderError):
            await _make_client().fetch_userinfo("at")
