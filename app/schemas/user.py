# File: app/schemas/user.py

from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator


class UserCredentials(BaseModel):
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        # Emails match case-insensitively
        return v.lower()


class UserRead(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    email_confirmed: bool

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode


class UserResponse(BaseModel):
    user: UserRead


class TokenUser(BaseModel):
    id: str
    email: str


class LoginResponse(BaseModel):
    token: str
    user: TokenUser


class MessageResponse(BaseModel):
    message: str
