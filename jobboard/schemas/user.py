from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from datetime import datetime
from uuid import UUID

from jobboard.utils.validators import PasswordValidator


class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        is_valid, errors = PasswordValidator.validate_password_strength(v)
        if not is_valid:
            raise ValueError("; ".join(errors))
        return v


class User(BaseModel):
    id: UUID
    email: EmailStr
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserRegistered(BaseModel):
    message: str
    email: EmailStr
