"""Pydantic schemas for API request/response models.

JSON keys are camelCase to match what browser clients send and expect.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from docsummarizer.domain.summary import (
    Summary,
    SummaryType,
    count_words,
    new_summary_id,
    title_from_filename,
)
from docsummarizer.domain.user import User


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryResponse(CamelModel):
    """Response schema for a summary."""

    id: str
    title: str
    content: str
    summary_type: SummaryType
    word_count: int
    created_at: datetime
    document_name: str

    @classmethod
    def from_domain(cls, summary: Summary) -> "SummaryResponse":
        return cls(
            id=summary.id,
            title=summary.title,
            content=summary.content,
            summary_type=summary.summary_type,
            word_count=summary.word_count,
            created_at=summary.created_at,
            document_name=summary.document_name,
        )


class SummaryPayload(CamelModel):
    """Summary-shaped request body; only content is required, checked by the route.

    Length limits mirror the summaries table columns.
    """

    id: str | None = Field(None, max_length=64)
    title: str | None = Field(None, max_length=500)
    content: str | None = None
    summary_type: SummaryType | None = None
    word_count: int | None = Field(None, ge=0)
    created_at: datetime | None = None
    document_name: str | None = Field(None, max_length=500)

    def to_domain(self, user_id: str | None = None) -> Summary:
        """Build a Summary, filling in any omitted fields."""
        content = self.content or ""
        document_name = self.document_name or "document"
        return Summary(
            id=self.id or new_summary_id(),
            title=self.title if self.title is not None else title_from_filename(document_name),
            content=content,
            summary_type=self.summary_type or SummaryType.STANDARD,
            word_count=self.word_count if self.word_count is not None else count_words(content),
            document_name=document_name,
            created_at=self.created_at or datetime.now(UTC),
            user_id=user_id,
        )


class CredentialsRequest(BaseModel):
    """Credentials sign-in body."""

    email: str | None = None
    password: str | None = None


class UserResponse(CamelModel):
    """Public view of a user."""

    id: str
    email: str
    name: str
    image: str | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, email=user.email, name=user.name, image=user.image)


class TokenResponse(CamelModel):
    """Session token issued after a successful sign-in."""

    access_token: str
    token_type: str = "bearer"
    expires: datetime
    user: UserResponse


class SessionResponse(BaseModel):
    """Current session; empty when signed out."""

    user: UserResponse | None = None
    expires: datetime | None = None
