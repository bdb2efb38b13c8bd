from supabase import Client
from skillswap.modules.dashboard.schemas import DashboardResponse, DashboardCounts
from skillswap.modules.users.schemas import UserResponse
from skillswap.modules.skills.service import SkillService
from skillswap.modules.meetups.service import MeetupService
from skillswap.modules.credits.service import CreditService
from typing import Dict, Any

UPCOMING_LIMIT = 5
RECENT_TRANSACTIONS_LIMIT = 5


class DashboardService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_dashboard(self, profile: Dict[str, Any]) -> DashboardResponse:
        """Profile, skills, next meetups and latest ledger rows in one payload"""
        user_id = profile["id"]
        skills = SkillService(self.supabase).get_user_skills(user_id)
        upcoming = MeetupService(self.supabase).get_upcoming_meetups(user_id, limit=UPCOMING_LIMIT)
        recent = CreditService(self.supabase).list_transactions(user_id, limit=RECENT_TRANSACTIONS_LIMIT)
        return DashboardResponse(
            user=UserResponse(**profile),
            offered_skills=skills.offered,
            wanted_skills=skills.wanted,
            upcoming_meetups=upcoming,
            recent_transactions=recent,
            counts=DashboardCounts(
                credits=profile["credits"],
                offered_skills=len(skills.offered),
                wanted_skills=len(skills.wanted),
                upcoming_meetups=len(upcoming),
            ),
        )
