from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime, date
from skillswap.modules.credits.schemas import CreditTransactionResponse


class DailyTaskResponse(BaseModel):
    id: str
    user_id: str
    task_type: str
    description: str
    credits_reward: int
    completed_date: Optional[date] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EarnOpportunity(BaseModel):
    id: str
    title: str
    description: str
    credits: int
    action: str
    href: Optional[str] = None
    task_type: Optional[str] = None
    completed: bool = False
    available: bool = True


class EarnOverviewResponse(BaseModel):
    credits: int
    earned_today: int
    todays_tasks: List[DailyTaskResponse]
    opportunities: List[EarnOpportunity]


class TaskCompletionResponse(BaseModel):
    task: DailyTaskResponse
    transaction: CreditTransactionResponse
    balance: int
