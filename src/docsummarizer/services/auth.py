"""Sign-in flows and stateless JWT sessions."""

import logging
from datetime import UTC, datetime, timedelta

import jwt

from docsummarizer.config import get_settings
from docsummarizer.domain.errors import AuthenticationError
from docsummarizer.domain.user import User
from docsummarizer.infrastructure.google_oauth import GoogleOAuthClient
from docsummarizer.repositories.user_repo import UserRepository, to_domain

logger = logging.getLogger(__name__)


class TokenService:
    """Issues and verifies session tokens carrying only the user ID."""

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        max_age_minutes: int | None = None,
    ) -> None:
        settings = get_settings()
        self.secret = secret or settings.auth_secret
        self.algorithm = algorithm or settings.jwt_algorithm
        self.max_age = timedelta(minutes=max_age_minutes or settings.session_max_age_minutes)

    def issue(self, user_id: str) -> tuple[str, datetime]:
        """Sign a token for a user.

        Returns:
            The encoded token and its expiry time
        """
        now = datetime.now(UTC)
        expires = now + self.max_age
        token = jwt.encode(
            {"sub": user_id, "iat": now, "exp": expires},
            self.secret,
            algorithm=self.algorithm,
        )
        return token, expires

    def verify(self, token: str) -> dict:
        """Decode a token and return its claims.

        Raises:
            AuthenticationError: signature, expiry or claims are invalid
        """
        try:
            return jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.warning("Session token expired")
            raise AuthenticationError("Session expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid session token: {e}")
            raise AuthenticationError("Invalid session token") from e


class AuthService:
    """Signs users in through the credentials flow or Google."""

    def __init__(
        self,
        user_repo: UserRepository,
        google: GoogleOAuthClient | None = None,
    ) -> None:
        self.user_repo = user_repo
        self.google = google or GoogleOAuthClient()

    async def authorize_credentials(self, email: str | None, password: str | None) -> User:
        """Accept any email/password pair, creating the user on first sight.

        The password is not verified. This flow is a placeholder sign-in.

        Raises:
            AuthenticationError: email or password missing
        """
        if not email or not password:
            raise AuthenticationError("Invalid credentials")

        user, created = await self.user_repo.get_or_create(email, provider="credentials")
        if created:
            logger.info(f"Created user {user.id} via credentials sign-in")
        return to_domain(user)

    async def authorize_google(self, code: str) -> User:
        """Complete the Google authorization-code flow."""
        tokens = await self.google.exchange_code(code)
        profile = await self.google.fetch_userinfo(tokens["access_token"])

        user, created = await self.user_repo.get_or_create(
            profile["email"],
            name=profile.get("name"),
            provider="google",
            image=profile.get("picture"),
        )
        if created:
            logger.info(f"Created user {user.id} via Google sign-in")
        return to_domain(user)
