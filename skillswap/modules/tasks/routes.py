from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.tasks.schemas import EarnOverviewResponse, TaskCompletionResponse
from skillswap.modules.tasks.service import TaskService
from skillswap.core.dependencies import get_current_profile
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/credits/earn", tags=["tasks"])


def get_task_service(supabase: Client = Depends(get_supabase)) -> TaskService:
    return TaskService(supabase)


@router.get("", response_model=EarnOverviewResponse)
async def get_earn_overview(
    profile: Dict = Depends(get_current_profile),
    service: TaskService = Depends(get_task_service)
):
    """Today's progress and the ways to earn credits"""
    return service.get_overview(profile)


@router.post("/{task_type}/complete", response_model=TaskCompletionResponse, status_code=201)
async def complete_task(
    task_type: str,
    profile: Dict = Depends(get_current_profile),
    service: TaskService = Depends(get_task_service)
):
    return service.complete_task(profile["id"], task_type)
