from pydantic import BaseModel, field_validator
from typing import Optional, Literal
from datetime import datetime


class UserUpdate(BaseModel):
    name: Optional[str] = None
    college: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("name", "college")
    @classmethod
    def strip_profile_text(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("Field cannot be blank")
        return value


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    college: str
    role: Literal["student", "instructor", "staff"]
    credits: int
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PublicUserResponse(BaseModel):
    """Profile fields visible to other users (instructor card, directory)"""
    id: str
    name: str
    college: str
    role: str
    avatar_url: Optional[str] = None
    bio: Optional[str] = None

    class Config:
        from_attributes = True


class NavbarSummary(BaseModel):
    id: str
    name: str
    email: str
    college: str
    role: str
    credits: int
    initial: str
