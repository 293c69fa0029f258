"""Summary domain entity."""

import secrets
import string
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

_ID_ALPHABET = string.ascii_lowercase + string.digits


class SummaryType(StrEnum):
    """Summary styles, each backed by its own prompt template."""

    STANDARD = "STANDARD"
    EXECUTIVE = "EXECUTIVE"
    TECHNICAL = "TECHNICAL"
    BULLET_POINTS = "BULLET_POINTS"

    @classmethod
    def parse(cls, value: "str | SummaryType | None") -> "SummaryType":
        """Resolve a style selector, falling back to STANDARD for unknown values."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.STANDARD
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.STANDARD


def new_summary_id() -> str:
    """Generate a short opaque identifier."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


def count_words(content: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(content.split())


def title_from_filename(filename: str) -> str:
    """Strip the last extension from a filename."""
    stem, dot, ext = filename.rpartition(".")
    if not dot or not stem or not ext:
        return filename
    return stem


@dataclass
class Summary:
    """Represents a generated document summary."""

    id: str
    title: str
    content: str
    summary_type: SummaryType
    word_count: int
    document_name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    user_id: str | None = None

    @classmethod
    def from_generation(
        cls,
        content: str,
        document_name: str,
        summary_type: SummaryType = SummaryType.STANDARD,
    ) -> "Summary":
        """Build a Summary right after a successful generation call."""
        return cls(
            id=new_summary_id(),
            title=title_from_filename(document_name),
            content=content,
            summary_type=summary_type,
            word_count=count_words(content),
            document_name=document_name,
        )
