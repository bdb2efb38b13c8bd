from pydantic import BaseModel, Field, model_validator
from typing import Optional, List, Literal
from datetime import datetime, date, time
from skillswap.modules.users.schemas import UserResponse, PublicUserResponse
from skillswap.modules.skills.schemas import SkillResponse
from skillswap.modules.credits.schemas import CreditTransactionResponse
from skillswap.config.catalog_config import DEFAULT_DURATION_MINUTES, DEFAULT_CREDIT_OFFER


class MeetupCreate(BaseModel):
    teacher_id: str
    skill_id: str
    title: Optional[str] = None  # defaults to "Learn <skill name>"
    description: Optional[str] = None
    scheduled_date: date
    scheduled_time: time
    duration_minutes: int = Field(default=DEFAULT_DURATION_MINUTES, gt=0)
    mode: Literal["virtual", "in-person"] = "virtual"
    location: Optional[str] = None
    meeting_link: Optional[str] = None
    credits_offered: int = Field(default=DEFAULT_CREDIT_OFFER, gt=0)

    @model_validator(mode="after")
    def require_location_for_in_person(self):
        if self.mode == "in-person" and not (self.location or "").strip():
            raise ValueError("Location is required for in-person sessions")
        return self


class MeetupResponse(BaseModel):
    id: str
    teacher_id: str
    learner_id: str
    skill_id: str
    title: str
    description: Optional[str] = None
    scheduled_date: date
    scheduled_time: time
    duration_minutes: int
    location: Optional[str] = None
    mode: Literal["virtual", "in-person"]
    meeting_link: Optional[str] = None
    status: Literal["scheduled", "completed", "cancelled"]
    credits_cost: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    teacher: Optional[PublicUserResponse] = None
    learner: Optional[PublicUserResponse] = None
    skill: Optional[SkillResponse] = None

    class Config:
        from_attributes = True


class BookingResponse(BaseModel):
    meetup: MeetupResponse
    transaction: CreditTransactionResponse
    balance: int


class MeetupSettlementResponse(BaseModel):
    meetup: MeetupResponse
    transaction: CreditTransactionResponse


class ScheduleContextResponse(BaseModel):
    current_user: UserResponse
    teacher: Optional[PublicUserResponse] = None
    skill: Optional[SkillResponse] = None
    suggested_title: str = ""
    balance: int
    duration_options: List[int]
    credit_options: List[int]
    default_duration: int = DEFAULT_DURATION_MINUTES
    default_credits: int = DEFAULT_CREDIT_OFFER
