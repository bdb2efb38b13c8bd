from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Literal
from datetime import datetime
from skillswap.modules.users.schemas import PublicUserResponse


class SkillResponse(BaseModel):
    id: str
    name: str
    category: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserSkillCreate(BaseModel):
    skill_name: str = Field(min_length=1)
    type: Literal["offered", "wanted"]
    proficiency_level: Optional[int] = Field(default=None, ge=1, le=5)

    @field_validator("skill_name")
    @classmethod
    def strip_skill_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Skill name cannot be blank")
        return value


class UserSkillResponse(BaseModel):
    id: str
    user_id: str
    skill_id: str
    type: Literal["offered", "wanted"]
    proficiency_level: Optional[int] = None
    created_at: Optional[datetime] = None
    skill: Optional[SkillResponse] = None

    class Config:
        from_attributes = True


class MySkillsResponse(BaseModel):
    offered: List[UserSkillResponse]
    wanted: List[UserSkillResponse]


class DirectoryEntry(BaseModel):
    id: str
    proficiency_level: Optional[int] = None
    skill: SkillResponse
    user: PublicUserResponse


class DirectoryResponse(BaseModel):
    items: List[DirectoryEntry]
    total: int
    showing: int
    colleges: List[str]
    categories: List[str]


class ReferenceDataResponse(BaseModel):
    colleges: List[str]
    categories: List[str]
    sample_skills: List[str]
    roles: List[str]
