from fastapi import APIRouter, Depends
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.skills.schemas import (
    SkillResponse, UserSkillCreate, UserSkillResponse, MySkillsResponse,
    DirectoryResponse, ReferenceDataResponse
)
from skillswap.modules.skills.service import SkillService
from skillswap.config.catalog_config import COLLEGES, SKILL_CATEGORIES, SAMPLE_SKILLS, USER_ROLES
from skillswap.core.dependencies import get_current_profile
from supabase import Client
from typing import List, Optional, Dict

router = APIRouter(prefix="/skills", tags=["skills"])


def get_skill_service(supabase: Client = Depends(get_supabase)) -> SkillService:
    return SkillService(supabase)


@router.get("", response_model=List[SkillResponse])
async def list_skills(
    category: Optional[str] = None,
    profile: Dict = Depends(get_current_profile),
    service: SkillService = Depends(get_skill_service)
):
    return service.list_skills(category)


@router.get("/reference", response_model=ReferenceDataResponse)
async def get_reference_data():
    """Selector options for signup and filters"""
    return ReferenceDataResponse(
        colleges=COLLEGES,
        categories=SKILL_CATEGORIES,
        sample_skills=list(SAMPLE_SKILLS),
        roles=USER_ROLES,
    )


@router.get("/directory", response_model=DirectoryResponse)
async def get_directory(
    search: Optional[str] = None,
    college: Optional[str] = None,
    category: Optional[str] = None,
    profile: Dict = Depends(get_current_profile),
    service: SkillService = Depends(get_skill_service)
):
    """Browse skills other students offer"""
    return service.get_directory(search=search, college=college, category=category)


@router.get("/mine", response_model=MySkillsResponse)
async def get_my_skills(
    profile: Dict = Depends(get_current_profile),
    service: SkillService = Depends(get_skill_service)
):
    return service.get_user_skills(profile["id"])


@router.post("/mine", response_model=UserSkillResponse, status_code=201)
async def add_my_skill(
    skill_data: UserSkillCreate,
    profile: Dict = Depends(get_current_profile),
    service: SkillService = Depends(get_skill_service)
):
    """List a skill as offered or wanted"""
    return service.attach_skill(
        profile["id"], skill_data.skill_name, skill_data.type, skill_data.proficiency_level
    )


@router.delete("/mine/{user_skill_id}", status_code=204)
async def remove_my_skill(
    user_skill_id: str,
    profile: Dict = Depends(get_current_profile),
    service: SkillService = Depends(get_skill_service)
):
    service.remove_user_skill(profile["id"], user_skill_id)
    return None


@router.get("/{skill_id}", response_model=SkillResponse)
async def get_skill(
    skill_id: str,
    profile: Dict = Depends(get_current_profile),
    service: SkillService = Depends(get_skill_service)
):
    return service.get_skill_by_id(skill_id)
