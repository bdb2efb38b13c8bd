from supabase import Client
from skillswap.modules.skills.schemas import (
    SkillResponse, UserSkillResponse, MySkillsResponse,
    DirectoryEntry, DirectoryResponse
)
from skillswap.config.catalog_config import DEFAULT_SKILL_CATEGORY, DEFAULT_PROFICIENCY
from typing import List, Optional, Dict, Any, Iterable, Tuple
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def _dedupe(names: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for name in names:
        cleaned = (name or "").strip()
        if cleaned and cleaned not in seen:
            seen.add(cleaned)
            result.append(cleaned)
    return result


def normalize_skill_lists(offered: Iterable[str], wanted: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Trim and de-duplicate skill names. A name listed as both offered and wanted stays offered."""
    offered_clean = _dedupe(offered)
    offered_set = set(offered_clean)
    wanted_clean = [name for name in _dedupe(wanted) if name not in offered_set]
    return offered_clean, wanted_clean


def unique_in_order(values: Iterable[Optional[str]]) -> List[str]:
    seen = set()
    result = []
    for value in values:
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def filter_directory(
    entries: List[DirectoryEntry],
    search: Optional[str] = None,
    college: Optional[str] = None,
    category: Optional[str] = None
) -> List[DirectoryEntry]:
    """Apply the directory search box and the college/category selectors"""
    filtered = entries
    if search:
        term = search.lower()
        filtered = [
            e for e in filtered
            if term in e.skill.name.lower()
            or term in (e.skill.description or "").lower()
            or term in e.user.name.lower()
        ]
    if college:
        filtered = [e for e in filtered if e.user.college == college]
    if category:
        filtered = [e for e in filtered if e.skill.category == category]
    return filtered


class SkillService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_skills(self, category: Optional[str] = None) -> List[SkillResponse]:
        """List the skill catalog"""
        try:
            query = self.supabase.table("skills").select("*")
            if category:
                query = query.eq("category", category)
            result = query.order("name").execute()
            return [SkillResponse(**skill) for skill in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_skill_by_id(self, skill_id: str) -> SkillResponse:
        try:
            result = self.supabase.table("skills")\
                .select("*")\
                .eq("id", skill_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        if not result.data:
            raise HTTPException(status_code=404, detail="Skill not found")
        return SkillResponse(**result.data[0])

    def find_or_create_skill(self, name: str) -> Dict[str, Any]:
        """Return the skills row with this exact name, creating it under the default category if missing"""
        existing = self.supabase.table("skills")\
            .select("*")\
            .eq("name", name)\
            .limit(1)\
            .execute()
        if existing.data:
            return existing.data[0]

        created = self.supabase.table("skills").insert({
            "name": name,
            "category": DEFAULT_SKILL_CATEGORY,
            "description": f"{name} skill",
        }).execute()
        if not created.data:
            raise HTTPException(status_code=500, detail=f"Failed to create skill {name}")
        logger.info(f"Created skill '{name}'")
        return created.data[0]

    def attach_skill(
        self,
        user_id: str,
        skill_name: str,
        skill_type: str,
        proficiency_level: Optional[int] = None
    ) -> UserSkillResponse:
        """Mark a skill as offered or wanted by a user"""
        skill_name = (skill_name or "").strip()
        if not skill_name:
            raise HTTPException(status_code=400, detail="Skill name cannot be blank")

        try:
            skill = self.find_or_create_skill(skill_name)

            duplicate = self.supabase.table("user_skills")\
                .select("id")\
                .eq("user_id", user_id)\
                .eq("skill_id", skill["id"])\
                .eq("type", skill_type)\
                .execute()
            if duplicate.data:
                raise HTTPException(status_code=409, detail=f"Skill already listed as {skill_type}")

            if proficiency_level is None:
                proficiency_level = DEFAULT_PROFICIENCY[skill_type]

            result = self.supabase.table("user_skills").insert({
                "user_id": user_id,
                "skill_id": skill["id"],
                "type": skill_type,
                "proficiency_level": proficiency_level,
            }).execute()
            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to add skill")

            row = dict(result.data[0])
            row["skill"] = skill
            return UserSkillResponse(**row)
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_user_skills(self, user_id: str) -> MySkillsResponse:
        """Own skills with the skill embedded, split by type"""
        try:
            result = self.supabase.table("user_skills")\
                .select("*, skill:skills(*)")\
                .eq("user_id", user_id)\
                .execute()
            skills = [UserSkillResponse(**row) for row in result.data or []]
            return MySkillsResponse(
                offered=[s for s in skills if s.type == "offered"],
                wanted=[s for s in skills if s.type == "wanted"],
            )
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def remove_user_skill(self, user_id: str, user_skill_id: str) -> bool:
        try:
            result = self.supabase.table("user_skills")\
                .delete()\
                .eq("id", user_skill_id)\
                .eq("user_id", user_id)\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        if not result.data:
            raise HTTPException(status_code=404, detail="Skill not found in your list")
        return True

    def get_directory(
        self,
        search: Optional[str] = None,
        college: Optional[str] = None,
        category: Optional[str] = None
    ) -> DirectoryResponse:
        """Offered skills with their teachers, filtered; facets come from the unfiltered set"""
        try:
            result = self.supabase.table("user_skills")\
                .select("*, skill:skills(*), user:users(*)")\
                .eq("type", "offered")\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        entries = [
            DirectoryEntry(
                id=row["id"],
                proficiency_level=row.get("proficiency_level"),
                skill=row["skill"],
                user=row["user"],
            )
            for row in result.data or []
            if row.get("skill") and row.get("user")
        ]
        filtered = filter_directory(entries, search=search, college=college, category=category)
        return DirectoryResponse(
            items=filtered,
            total=len(entries),
            showing=len(filtered),
            colleges=unique_in_order(e.user.college for e in entries),
            categories=unique_in_order(e.skill.category for e in entries),
        )
