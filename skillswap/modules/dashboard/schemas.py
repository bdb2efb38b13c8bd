from pydantic import BaseModel
from typing import List
from skillswap.modules.users.schemas import UserResponse
from skillswap.modules.skills.schemas import UserSkillResponse
from skillswap.modules.meetups.schemas import MeetupResponse
from skillswap.modules.credits.schemas import CreditTransactionResponse


class DashboardCounts(BaseModel):
    credits: int
    offered_skills: int
    wanted_skills: int
    upcoming_meetups: int


class DashboardResponse(BaseModel):
    user: UserResponse
    offered_skills: List[UserSkillResponse]
    wanted_skills: List[UserSkillResponse]
    upcoming_meetups: List[MeetupResponse]
    recent_transactions: List[CreditTransactionResponse]
    counts: DashboardCounts
