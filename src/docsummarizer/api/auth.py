"""Sign-in and session endpoints."""

import logging
import secrets
from datetime import UTC, datetime

from fastapi import APIRouter, Body, HTTPException, Request, Response
from fastapi.responses import RedirectResponse

from docsummarizer.api.dependencies import (
    AuthServiceDep,
    SessionClaimsDep,
    TokenServiceDep,
    UserRepoDep,
)
from docsummarizer.api.schemas import (
    CredentialsRequest,
    SessionResponse,
    TokenResponse,
    UserResponse,
)
from docsummarizer.config import get_settings
from docsummarizer.domain.errors import AuthenticationError, OAuthProviderError
from docsummarizer.domain.user import User
from docsummarizer.repositories.user_repo import to_domain
from docsummarizer.services.auth import TokenService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

STATE_COOKIE = "oauth_state"


def _token_response(tokens: TokenService, user: User) -> TokenResponse:
    token, expires = tokens.issue(user.id)
    return TokenResponse(
        access_token=token,
        expires=expires,
        user=UserResponse.from_domain(user),
    )


@router.get("/providers")
async def list_providers() -> dict:
    """List enabled sign-in providers."""
    providers = {
        "credentials": {
            "id": "credentials",
            "name": "Credentials",
            "callbackUrl": "/api/auth/callback/credentials",
        }
    }
    if get_settings().google_enabled:
        providers["google"] = {
            "id": "google",
            "name": "Google",
            "signinUrl": "/api/auth/signin/google",
            "callbackUrl": "/api/auth/callback/google",
        }
    return providers


@router.post("/callback/credentials", response_model=TokenResponse)
async def credentials_sign_in(
    auth_service: AuthServiceDep,
    tokens: TokenServiceDep,
    credentials: CredentialsRequest | None = Body(None),
) -> TokenResponse:
    """Sign in with email and password.

    Any pair is accepted and unknown emails get a new account.
    """
    credentials = credentials or CredentialsRequest()
    try:
        user = await auth_service.authorize_credentials(credentials.email, credentials.password)
    except AuthenticationError as e:
        raise HTTPException(401, str(e))
    return _token_response(tokens, user)


@router.get("/signin/google")
async def google_sign_in(auth_service: AuthServiceDep) -> RedirectResponse:
    """Redirect to Google's consent screen."""
    settings = get_settings()
    if not settings.google_enabled:
        raise HTTPException(404, "Provider not configured")

    state = secrets.token_urlsafe(32)
    response = RedirectResponse(auth_service.google.authorization_url(state))
    response.set_cookie(
        STATE_COOKIE,
        state,
        max_age=600,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response


@router.get("/callback/google", response_model=TokenResponse)
async def google_callback(
    request: Request,
    response: Response,
    auth_service: AuthServiceDep,
    tokens: TokenServiceDep,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> TokenResponse:
    """Complete Google sign-in and issue a session token."""
    if not get_settings().google_enabled:
        raise HTTPException(404, "Provider not configured")
    if error:
        raise HTTPException(400, f"Google sign-in failed: {error}")

    expected = request.cookies.get(STATE_COOKIE)
    if not code or not state or not expected or not secrets.compare_digest(state, expected):
        raise HTTPException(400, "Invalid OAuth state")

    try:
        user = await auth_service.authorize_google(code)
    except OAuthProviderError as e:
        raise HTTPException(502, str(e))

    response.delete_cookie(STATE_COOKIE)
    return _token_response(tokens, user)


@router.get("/session", response_model=SessionResponse, response_model_exclude_none=True)
async def get_session_info(
    claims: SessionClaimsDep,
    user_repo: UserRepoDep,
) -> SessionResponse:
    """Describe the current session, or return an empty object when signed out."""
    if claims is None:
        return SessionResponse()

    user = await user_repo.get_by_id(claims["sub"])
    if user is None:
        raise HTTPException(401, "Unknown user")

    return SessionResponse(
        user=UserResponse.from_domain(to_domain(user)),
        expires=datetime.fromtimestamp(claims["exp"], tz=UTC),
    )
