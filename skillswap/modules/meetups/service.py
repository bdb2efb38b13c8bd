from supabase import Client
from skillswap.modules.meetups.schemas import (
    MeetupCreate, MeetupResponse, BookingResponse,
    MeetupSettlementResponse, ScheduleContextResponse
)
from skillswap.modules.users.schemas import UserResponse
from skillswap.modules.users.service import UserService
from skillswap.modules.skills.service import SkillService
from skillswap.modules.credits.service import CreditService, INSUFFICIENT_CREDITS_DETAIL
from skillswap.config.catalog_config import DURATION_OPTIONS, CREDIT_OFFER_OPTIONS
from skillswap.core.time_utils import utc_now, utc_today
from typing import List, Optional, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

MEETUP_SELECT = "*, teacher:users!teacher_id(*), learner:users!learner_id(*), skill:skills(*)"


class MeetupService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.credits = CreditService(supabase)

    def get_schedule_context(
        self,
        profile: Dict[str, Any],
        teacher_id: Optional[str] = None,
        skill_id: Optional[str] = None
    ) -> ScheduleContextResponse:
        """Everything the booking form needs before submitting"""
        teacher = UserService(self.supabase).get_public_profile(teacher_id) if teacher_id else None
        skill = SkillService(self.supabase).get_skill_by_id(skill_id) if skill_id else None
        return ScheduleContextResponse(
            current_user=UserResponse(**profile),
            teacher=teacher,
            skill=skill,
            suggested_title=f"Learn {skill.name}" if skill else "",
            balance=profile["credits"],
            duration_options=DURATION_OPTIONS,
            credit_options=CREDIT_OFFER_OPTIONS,
        )

    def book_meetup(self, profile: Dict[str, Any], meetup_data: MeetupCreate) -> BookingResponse:
        """Create a scheduled meetup and debit the learner"""
        learner_id = profile["id"]
        if meetup_data.teacher_id == learner_id:
            raise HTTPException(status_code=400, detail="You cannot book a session with yourself")
        if meetup_data.scheduled_date < utc_today():
            raise HTTPException(status_code=400, detail="Session date cannot be in the past")

        teacher = UserService(self.supabase).get_public_profile(meetup_data.teacher_id)
        skill = SkillService(self.supabase).get_skill_by_id(meetup_data.skill_id)

        cost = meetup_data.credits_offered
        if profile["credits"] < cost:
            raise HTTPException(status_code=400, detail=INSUFFICIENT_CREDITS_DETAIL)

        title = (meetup_data.title or "").strip() or f"Learn {skill.name}"
        in_person = meetup_data.mode == "in-person"
        try:
            result = self.supabase.table("meetups").insert({
                "teacher_id": teacher.id,
                "learner_id": learner_id,
                "skill_id": skill.id,
                "title": title,
                "description": meetup_data.description,
                "scheduled_date": meetup_data.scheduled_date.isoformat(),
                "scheduled_time": meetup_data.scheduled_time.isoformat(),
                "duration_minutes": meetup_data.duration_minutes,
                "location": meetup_data.location if in_person else None,
                "mode": meetup_data.mode,
                "meeting_link": meetup_data.meeting_link if not in_person else None,
                "credits_cost": cost,
                "status": "scheduled",
            }).execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        if not result.data:
            raise HTTPException(status_code=500, detail="Failed to create meetup")
        meetup = result.data[0]

        try:
            entry = self.credits.spend(
                learner_id, cost, f"Booked session: {title}", meetup_id=meetup["id"]
            )
        except HTTPException:
            # Unpaid booking must not stay on the teacher's calendar
            self._set_status(meetup["id"], "cancelled")
            raise

        logger.info(f"Meetup {meetup['id']} booked: learner={learner_id} teacher={teacher.id} cost={cost}")
        meetup["teacher"] = teacher.model_dump()
        meetup["learner"] = profile
        meetup["skill"] = skill.model_dump()
        return BookingResponse(
            meetup=MeetupResponse(**meetup),
            transaction=entry.transaction,
            balance=entry.balance,
        )

    def get_upcoming_meetups(self, user_id: str, limit: int = 5) -> List[MeetupResponse]:
        """Scheduled meetups from today on where the user teaches or learns, soonest first"""
        try:
            result = self.supabase.table("meetups")\
                .select(MEETUP_SELECT)\
                .or_(f"teacher_id.eq.{user_id},learner_id.eq.{user_id}")\
                .eq("status", "scheduled")\
                .gte("scheduled_date", utc_today().isoformat())\
                .order("scheduled_date")\
                .order("scheduled_time")\
                .limit(limit)\
                .execute()
            return [MeetupResponse(**m) for m in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def list_meetups(self, user_id: str, status: Optional[str] = None) -> List[MeetupResponse]:
        try:
            query = self.supabase.table("meetups")\
                .select(MEETUP_SELECT)\
                .or_(f"teacher_id.eq.{user_id},learner_id.eq.{user_id}")
            if status:
                query = query.eq("status", status)
            result = query.order("scheduled_date", desc=True).execute()
            return [MeetupResponse(**m) for m in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_meetup(self, user_id: str, meetup_id: str) -> MeetupResponse:
        """Get a meetup the user takes part in"""
        try:
            result = self.supabase.table("meetups")\
                .select(MEETUP_SELECT)\
                .eq("id", meetup_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        if not result.data:
            raise HTTPException(status_code=404, detail="Meetup not found")
        meetup = MeetupResponse(**result.data[0])
        if user_id not in (meetup.teacher_id, meetup.learner_id):
            raise HTTPException(status_code=403, detail="You are not part of this meetup")
        return meetup

    def complete_meetup(self, user_id: str, meetup_id: str) -> MeetupSettlementResponse:
        """Teacher marks the session done and is paid its cost"""
        meetup = self.get_meetup(user_id, meetup_id)
        if meetup.teacher_id != user_id:
            raise HTTPException(status_code=403, detail="Only the teacher can complete a meetup")
        self._transition(meetup, "completed")
        try:
            entry = self.credits.earn(
                meetup.teacher_id, meetup.credits_cost, f"Taught session: {meetup.title}", meetup_id=meetup.id
            )
        except HTTPException:
            self._set_status(meetup.id, "scheduled")
            raise
        meetup.status = "completed"
        return MeetupSettlementResponse(meetup=meetup, transaction=entry.transaction)

    def cancel_meetup(self, user_id: str, meetup_id: str) -> MeetupSettlementResponse:
        """Either participant cancels; the learner gets the cost back"""
        meetup = self.get_meetup(user_id, meetup_id)
        self._transition(meetup, "cancelled")
        try:
            entry = self.credits.earn(
                meetup.learner_id, meetup.credits_cost, f"Refund: {meetup.title}", meetup_id=meetup.id
            )
        except HTTPException:
            self._set_status(meetup.id, "scheduled")
            raise
        meetup.status = "cancelled"
        return MeetupSettlementResponse(meetup=meetup, transaction=entry.transaction)

    def _transition(self, meetup: MeetupResponse, new_status: str):
        """Move a scheduled meetup to new_status; fails if another request got there first"""
        if meetup.status != "scheduled":
            raise HTTPException(status_code=400, detail=f"Meetup is already {meetup.status}")
        try:
            result = self.supabase.table("meetups")\
                .update({"status": new_status, "updated_at": utc_now().isoformat()})\
                .eq("id", meetup.id)\
                .eq("status", "scheduled")\
                .execute()
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))
        if not result.data:
            raise HTTPException(status_code=409, detail="Meetup status changed, please reload")

    def _set_status(self, meetup_id: str, status: str):
        try:
            self.supabase.table("meetups")\
                .update({"status": status, "updated_at": utc_now().isoformat()})\
                .eq("id", meetup_id)\
                .execute()
        except Exception as e:
            logger.error(f"Could not set meetup {meetup_id} to {status}: {e}")
