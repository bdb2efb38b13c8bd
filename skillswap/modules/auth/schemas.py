from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional, List, Literal


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str


class SignupRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str
    confirm_password: str
    college: str = Field(min_length=1)
    role: Literal["student", "instructor", "staff"]
    bio: Optional[str] = None
    offered_skills: List[str] = []
    wanted_skills: List[str] = []

    @field_validator("name", "college")
    @classmethod
    def strip_required_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Field cannot be blank")
        return value


class SignupResponse(BaseModel):
    user_id: str
    email: str
    credits: int
    offered_skills: List[str]
    wanted_skills: List[str]
    message: str
