"""User repository for database operations."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docsummarizer.domain.user import User
from docsummarizer.infrastructure.models import UserModel


def to_domain(model: UserModel) -> User:
    """Convert an ORM row to a domain User."""
    return User(
        id=model.id,
        email=model.email,
        name=model.name,
        provider=model.provider,
        image=model.image,
        created_at=model.created_at,
    )


class UserRepository:
    """Repository for User CRUD operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def get_by_id(self, user_id: str) -> UserModel | None:
        """Get a user by ID."""
        return await self.session.get(UserModel, user_id)

    async def get_by_email(self, email: str) -> UserModel | None:
        """Get a user by email address."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(
        self,
        email: str,
        name: str | None = None,
        provider: str = "credentials",
        image: str | None = None,
    ) -> UserModel:
        """Create a new user."""
        user = UserModel(
            id=str(uuid.uuid4()),
            email=email,
            name=name or User.default_name(email),
            provider=provider,
            image=image,
        )
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def get_or_create(
        self,
        email: str,
        name: str | None = None,
        provider: str = "credentials",
        image: str | None = None,
    ) -> tuple[UserModel, bool]:
        """Get a user by email, creating it on first sight.

        Returns:
            The user and whether it was created
        """
        user = await self.get_by_email(email)
        if user is not None:
            return user, False
        return await self.create(email, name, provider, image), True
