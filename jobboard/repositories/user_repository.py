from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from typing import Optional

from jobboard.core.exceptions import ConflictError
from jobboard.core.security import security_service
from jobboard.models.user import User
from jobboard.schemas.user import UserRegister


class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user_with_password(self, user_data: UserRegister) -> User:
        """Create a new user with password."""
        existing_user = await self.get_by_email(user_data.email)
        if existing_user:
            raise ConflictError(
                f"User with email {user_data.email} already exists",
                details={"email": user_data.email},
            )

        hashed_password = security_service.get_password_hash(user_data.password)

        db_user = User(
            email=user_data.email,
            username=user_data.email,
            hashed_password=hashed_password,
            is_active=True
        )

        self.db.add(db_user)
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError(
                f"User with email {user_data.email} already exists",
                details={"email": user_data.email},
            )
        await self.db.refresh(db_user)
        return db_user

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
