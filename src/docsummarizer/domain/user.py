"""User domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Represents a signed-in account."""

    id: str
    email: str
    name: str
    provider: str
    image: str | None = None
    created_at: datetime | None = None

    @staticmethod
    def default_name(email: str) -> str:
        """Derive a display name from the local part of an email."""
        return email.split("@")[0]
