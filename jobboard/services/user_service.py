from jobboard.core.logger import AppLogger
from jobboard.repositories.user_repository import UserRepository
from jobboard.schemas.user import User, UserRegister

logger = AppLogger("user_service")


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register_user(self, user_data: UserRegister) -> User:
        db_user = await self.user_repo.create_user_with_password(user_data)
        logger.info("User registered", user_id=db_user.id)
        return User.model_validate(db_user)
