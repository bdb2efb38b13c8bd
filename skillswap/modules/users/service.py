from supabase import Client
from skillswap.modules.users.schemas import UserUpdate, UserResponse, PublicUserResponse, NavbarSummary
from skillswap.core.time_utils import utc_now
from typing import Optional, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


def build_navbar_summary(profile: Dict[str, Any]) -> NavbarSummary:
    name = profile.get("name") or ""
    return NavbarSummary(
        id=profile["id"],
        name=name,
        email=profile["email"],
        college=profile["college"],
        role=profile["role"],
        credits=profile["credits"],
        initial=name[:1].upper(),
    )


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def create_profile(
        self,
        user_id: str,
        email: str,
        name: str,
        college: str,
        role: str,
        bio: Optional[str],
        credits: int
    ) -> UserResponse:
        """Insert the users row for a freshly registered auth user"""
        try:
            result = self.supabase.table("users").insert({
                "id": user_id,
                "email": email,
                "name": name,
                "college": college,
                "role": role,
                "bio": bio,
                "credits": credits,
            }).execute()
        except Exception as e:
            logger.error(f"Profile creation error for {user_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create user profile")

        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create user profile")
        return UserResponse(**result.data[0])

    def get_profile(self, user_id: str) -> Dict[str, Any]:
        """Raw users row by ID"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        if not result.data:
            raise HTTPException(status_code=404, detail="User not found")
        return result.data[0]

    def get_user_by_id(self, user_id: str) -> UserResponse:
        return UserResponse(**self.get_profile(user_id))

    def get_public_profile(self, user_id: str) -> PublicUserResponse:
        return PublicUserResponse(**self.get_profile(user_id))

    def update_user(self, user_id: str, user_data: UserUpdate) -> UserResponse:
        """Update user profile"""
        try:
            update_data = {"updated_at": utc_now().isoformat()}
            if user_data.name is not None:
                update_data["name"] = user_data.name
            if user_data.college is not None:
                update_data["college"] = user_data.college
            if user_data.avatar_url is not None:
                update_data["avatar_url"] = user_data.avatar_url
            if user_data.bio is not None:
                update_data["bio"] = user_data.bio

            result = self.supabase.table("users")\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise HTTPException(status_code=404, detail="User not found")

            return UserResponse(**result.data[0])
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
