from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.dashboard.schemas import DashboardResponse
from skillswap.modules.dashboard.service import DashboardService
from skillswap.core.dependencies import get_current_profile
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    profile: Dict = Depends(get_current_profile),
    service: DashboardService = Depends(get_dashboard_service)
):
    return service.get_dashboard(profile)
