"""FastAPI dependency injection providers."""

import logging
from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Body, Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from docsummarizer.api.schemas import SummaryPayload
from docsummarizer.domain.errors import AuthenticationError
from docsummarizer.infrastructure.database import get_session
from docsummarizer.repositories.summary_repo import SummaryRepository
from docsummarizer.repositories.user_repo import UserRepository
from docsummarizer.services.auth import AuthService, TokenService
from docsummarizer.services.extractor import TextExtractor
from docsummarizer.services.summarizer import SummarizerService

logger = logging.getLogger(__name__)

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


@lru_cache
def get_extractor() -> TextExtractor:
    """Provide the shared TextExtractor."""
    return TextExtractor()


@lru_cache
def get_summarizer() -> SummarizerService:
    """Provide the shared SummarizerService (one completion client per process)."""
    return SummarizerService()


def get_token_service() -> TokenService:
    """Provide TokenService instance."""
    return TokenService()


async def get_summary_repository(
    session: SessionDep,
) -> AsyncGenerator[SummaryRepository, None]:
    """Provide SummaryRepository instance."""
    yield SummaryRepository(session)


async def get_user_repository(
    session: SessionDep,
) -> AsyncGenerator[UserRepository, None]:
    """Provide UserRepository instance."""
    yield UserRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """Provide AuthService instance."""
    return AuthService(user_repo)


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]

# --- Bearer session authentication ---

_bearer = HTTPBearer(auto_error=False)


async def get_session_claims(
    tokens: TokenServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
) -> dict | None:
    """Verify the caller's bearer token.

    Anonymous callers get None. A token that is present but invalid is rejected.
    """
    if credentials is None:
        return None
    try:
        return tokens.verify(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=401,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


SessionClaimsDep = Annotated[dict | None, Depends(get_session_claims)]


async def get_summary_payload(body: Any = Body(None)) -> SummaryPayload:
    """Validate a Summary-shaped JSON body.

    Anything that is not an object with non-empty content is a 400.
    """
    try:
        payload = SummaryPayload.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Rejected summary body: {e.error_count()} validation errors")
        raise HTTPException(400, "Invalid summary data")
    if not payload.content:
        raise HTTPException(400, "Invalid summary data")
    return payload


async def get_current_user_id(claims: SessionClaimsDep) -> str | None:
    """Resolve the caller's user ID, or None when anonymous."""
    return claims["sub"] if claims else None


# Type aliases for commonly used dependencies
SummaryRepoDep = Annotated[SummaryRepository, Depends(get_summary_repository)]
ExtractorDep = Annotated[TextExtractor, Depends(get_extractor)]
SummarizerDep = Annotated[SummarizerService, Depends(get_summarizer)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentUserIdDep = Annotated[str | None, Depends(get_current_user_id)]
SummaryPayloadDep = Annotated[SummaryPayload, Depends(get_summary_payload)]
