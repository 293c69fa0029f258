"""Summary repository for history persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docsummarizer.domain.errors import SummaryOwnershipError
from docsummarizer.domain.summary import Summary, SummaryType
from docsummarizer.infrastructure.models import SummaryModel


def to_domain(model: SummaryModel) -> Summary:
    """Convert an ORM row to a domain Summary."""
    return Summary(
        id=model.id,
        title=model.title,
        content=model.content,
        summary_type=SummaryType.parse(model.summary_type),
        word_count=model.word_count,
        document_name=model.document_name,
        created_at=model.created_at,
        user_id=model.user_id,
    )


class SummaryRepository:
    """Repository for saved Summary operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def get_by_id(self, summary_id: str) -> SummaryModel | None:
        """Get a summary by its ID."""
        return await self.session.get(SummaryModel, summary_id)

    async def list_summaries(
        self,
        user_id: str | None = None,
        limit: int = 50,
    ) -> list[SummaryModel]:
        """List summaries newest first, optionally scoped to one user."""
        stmt = select(SummaryModel)
        if user_id is not None:
            stmt = stmt.where(SummaryModel.user_id == user_id)
        stmt = stmt.order_by(SummaryModel.created_at.desc()).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, summary: Summary) -> SummaryModel:
        """Insert a summary, or overwrite one previously saved by the same owner.

        Anonymous summaries share the anonymous owner.

        Raises:
            SummaryOwnershipError: the ID belongs to a different owner
        """
        model = await self.get_by_id(summary.id)
        if model is None:
            model = SummaryModel(id=summary.id, user_id=summary.user_id)
            self.session.add(model)
        elif model.user_id != summary.user_id:
            raise SummaryOwnershipError(summary.id)

        model.title = summary.title
        model.content = summary.content
        model.summary_type = summary.summary_type.value
        model.word_count = summary.word_count
        model.document_name = summary.document_name
        model.created_at = summary.created_at
        await self.session.flush()
        return model
