from fastapi import APIRouter, Depends, status

from jobboard.core.dependencies import get_user_service
from jobboard.schemas.user import UserRegister, UserRegistered
from jobboard.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=UserRegistered, status_code=status.HTTP_201_CREATED)
async def register(
        user_data: UserRegister,
        user_service: UserService = Depends(get_user_service),
) -> UserRegistered:
    """Create a user account; the email is also the username."""
    user = await user_service.register_user(user_data)
    return UserRegistered(message="User created", email=user.email)
