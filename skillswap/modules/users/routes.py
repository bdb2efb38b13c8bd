from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.users.schemas import UserUpdate, UserResponse, PublicUserResponse, NavbarSummary
from skillswap.modules.users.service import UserService, build_navbar_summary
from skillswap.core.dependencies import get_current_profile
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


@router.get("/me", response_model=UserResponse)
async def get_my_profile(profile: Dict = Depends(get_current_profile)):
    return profile


@router.put("/me", response_model=UserResponse)
async def update_my_profile(
    user_data_body: UserUpdate,
    profile: Dict = Depends(get_current_profile),
    service: UserService = Depends(get_user_service)
):
    """Update own profile; only provided fields change"""
    return service.update_user(profile["id"], user_data_body)


@router.get("/me/summary", response_model=NavbarSummary)
async def get_my_summary(profile: Dict = Depends(get_current_profile)):
    """Name, role and balance for the navigation bar"""
    return build_navbar_summary(profile)


@router.get("/{user_id}", response_model=PublicUserResponse)
async def get_user(
    user_id: str,
    profile: Dict = Depends(get_current_profile),
    service: UserService = Depends(get_user_service)
):
    """Public profile of another user"""
    return service.get_public_profile(user_id)
