from fastapi import APIRouter, Depends, Query
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.meetups.schemas import (
    MeetupCreate, MeetupResponse, BookingResponse,
    MeetupSettlementResponse, ScheduleContextResponse
)
from skillswap.modules.meetups.service import MeetupService
from skillswap.core.dependencies import get_current_profile
from supabase import Client
from typing import List, Optional, Dict, Literal

router = APIRouter(prefix="/meetups", tags=["meetups"])


def get_meetup_service(supabase: Client = Depends(get_supabase)) -> MeetupService:
    return MeetupService(supabase)


@router.get("/schedule", response_model=ScheduleContextResponse)
async def get_schedule_context(
    teacher: Optional[str] = None,
    skill: Optional[str] = None,
    profile: Dict = Depends(get_current_profile),
    service: MeetupService = Depends(get_meetup_service)
):
    """Prefill data for booking a session with ?teacher=<id>&skill=<id>"""
    return service.get_schedule_context(profile, teacher_id=teacher, skill_id=skill)


@router.post("", response_model=BookingResponse, status_code=201)
async def book_meetup(
    meetup_data: MeetupCreate,
    profile: Dict = Depends(get_current_profile),
    service: MeetupService = Depends(get_meetup_service)
):
    """Book a session and pay for it in credits"""
    return service.book_meetup(profile, meetup_data)


@router.get("/upcoming", response_model=List[MeetupResponse])
async def get_upcoming_meetups(
    limit: int = Query(5, ge=1, le=50),
    profile: Dict = Depends(get_current_profile),
    service: MeetupService = Depends(get_meetup_service)
):
    return service.get_upcoming_meetups(profile["id"], limit=limit)


@router.get("", response_model=List[MeetupResponse])
async def list_meetups(
    status: Optional[Literal["scheduled", "completed", "cancelled"]] = None,
    profile: Dict = Depends(get_current_profile),
    service: MeetupService = Depends(get_meetup_service)
):
    return service.list_meetups(profile["id"], status=status)


@router.get("/{meetup_id}", response_model=MeetupResponse)
async def get_meetup(
    meetup_id: str,
    profile: Dict = Depends(get_current_profile),
    service: MeetupService = Depends(get_meetup_service)
):
    return service.get_meetup(profile["id"], meetup_id)


@router.post("/{meetup_id}/complete", response_model=MeetupSettlementResponse)
async def complete_meetup(
    meetup_id: str,
    profile: Dict = Depends(get_current_profile),
    service: MeetupService = Depends(get_meetup_service)
):
    """Teacher confirms the session happened and collects the credits"""
    return service.complete_meetup(profile["id"], meetup_id)


@router.post("/{meetup_id}/cancel", response_model=MeetupSettlementResponse)
async def cancel_meetup(
    meetup_id: str,
    profile: Dict = Depends(get_current_profile),
    service: MeetupService = Depends(get_meetup_service)
):
    return service.cancel_meetup(profile["id"], meetup_id)
