"""Summary history endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError

from docsummarizer.api.dependencies import CurrentUserIdDep, SummaryPayloadDep, SummaryRepoDep
from docsummarizer.api.schemas import SummaryResponse
from docsummarizer.domain.errors import SummaryOwnershipError
from docsummarizer.repositories.summary_repo import to_domain

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=list[SummaryResponse])
async def list_history(
    summary_repo: SummaryRepoDep,
    user_id: CurrentUserIdDep,
    limit: int = Query(50, ge=1, le=200),
) -> list[SummaryResponse]:
    """List saved summaries, newest first.

    Signed-in callers see their own summaries; anonymous callers see all.
    """
    try:
        rows = await summary_repo.list_summaries(user_id=user_id, limit=limit)
    except SQLAlchemyError:
        logger.exception("History fetch error")
        raise HTTPException(500, "Failed to fetch summary history")
    return [SummaryResponse.from_domain(to_domain(row)) for row in rows]


@router.post("", response_model=SummaryResponse)
async def save_to_history(
    summary_repo: SummaryRepoDep,
    user_id: CurrentUserIdDep,
    payload: SummaryPayloadDep,
) -> SummaryResponse:
    """Save a summary to history and echo it back.

    Posting an ID the caller already saved overwrites it. An ID owned by
    someone else is a 409.
    """
    summary = payload.to_domain(user_id=user_id)
    try:
        await summary_repo.save(summary)
    except SummaryOwnershipError as e:
        logger.warning(f"Summary {e.summary_id} belongs to another owner")
        raise HTTPException(409, str(e))
    except SQLAlchemyError:
        logger.exception("History save error")
        raise HTTPException(500, "Failed to save summary to history")

    logger.info(f"Saved summary {summary.id} to history")
    return SummaryResponse.from_domain(summary)
