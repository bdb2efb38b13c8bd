from supabase import Client
from skillswap.modules.tasks.schemas import (
    DailyTaskResponse, EarnOpportunity, EarnOverviewResponse, TaskCompletionResponse
)
from skillswap.modules.credits.service import CreditService
from skillswap.config.catalog_config import EARN_OPPORTUNITIES, COMPLETABLE_TASKS
from skillswap.core.time_utils import utc_today
from typing import List, Dict, Any
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)

ALREADY_COMPLETED_DETAIL = "Task already completed today!"


def resolve_task_type(task_id: str) -> str:
    """Accept either a task_type or the id of the earn opportunity that carries it"""
    for opportunity in EARN_OPPORTUNITIES:
        if opportunity["id"] == task_id and opportunity.get("task_type"):
            return opportunity["task_type"]
    return task_id


def build_opportunities(todays_tasks: List[DailyTaskResponse], profile: Dict[str, Any]) -> List[EarnOpportunity]:
    """Earning opportunities with completion flags for today"""
    done_types = {t.task_type for t in todays_tasks}
    opportunities = []
    for config in EARN_OPPORTUNITIES:
        task_type = config.get("task_type")
        if task_type:
            completed = task_type in done_types
        elif config["id"] == "complete-profile":
            completed = bool((profile.get("bio") or "").strip())
        else:
            completed = False
        opportunities.append(EarnOpportunity(
            id=config["id"],
            title=config["title"],
            description=config["description"],
            credits=config["credits"],
            action=config["action"],
            href=config.get("href"),
            task_type=task_type,
            completed=completed,
            available=config["available"],
        ))
    return opportunities


class TaskService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.credits = CreditService(supabase)

    def get_todays_tasks(self, user_id: str) -> List[DailyTaskResponse]:
        try:
            result = self.supabase.table("daily_tasks")\
                .select("*")\
                .eq("user_id", user_id)\
                .eq("completed_date", utc_today().isoformat())\
                .execute()
            return [DailyTaskResponse(**task) for task in result.data or []]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    def get_overview(self, profile: Dict[str, Any]) -> EarnOverviewResponse:
        todays_tasks = self.get_todays_tasks(profile["id"])
        return EarnOverviewResponse(
            credits=profile["credits"],
            earned_today=sum(t.credits_reward for t in todays_tasks),
            todays_tasks=todays_tasks,
            opportunities=build_opportunities(todays_tasks, profile),
        )

    def complete_task(self, user_id: str, task_type: str) -> TaskCompletionResponse:
        """Record a daily task for today and pay out its reward"""
        task_type = resolve_task_type(task_type)
        if task_type not in COMPLETABLE_TASKS:
            if any(o.get("task_type") == task_type or o["id"] == task_type for o in EARN_OPPORTUNITIES):
                raise HTTPException(status_code=400, detail="This task cannot be completed directly")
            raise HTTPException(status_code=404, detail="Task not found")

        reward = COMPLETABLE_TASKS[task_type]
        today = utc_today().isoformat()
        try:
            if self._find_todays_tasks(user_id, task_type, today):
                raise HTTPException(status_code=409, detail=ALREADY_COMPLETED_DETAIL)

            inserted = self.supabase.table("daily_tasks").insert({
                "user_id": user_id,
                "task_type": task_type,
                "description": reward["description"],
                "credits_reward": reward["credits"],
                "completed_date": today,
            }).execute()
            if not inserted.data:
                raise HTTPException(status_code=500, detail="Failed to record task")
        except HTTPException:
            raise
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

        task = DailyTaskResponse(**inserted.data[0])

        # A concurrent request may have inserted between our check and insert; the earliest row wins
        try:
            rows = self._find_todays_tasks(user_id, task_type, today)
        except Exception as e:
            self._delete_task(task.id)
            raise HTTPException(status_code=500, detail=str(e))
        first = min(rows, key=lambda r: (str(r.get("created_at") or ""), str(r["id"])), default=None)
        if first is None or first["id"] != task.id:
            self._delete_task(task.id)
            raise HTTPException(status_code=409, detail=ALREADY_COMPLETED_DETAIL)

        try:
            entry = self.credits.earn(user_id, reward["credits"], reward["description"])
        except HTTPException:
            # Unpaid task must not block a retry today
            self._delete_task(task.id)
            raise

        logger.info(f"User {user_id} completed {task_type} (+{reward['credits']})")
        return TaskCompletionResponse(
            task=task,
            transaction=entry.transaction,
            balance=entry.balance,
        )

    def _find_todays_tasks(self, user_id: str, task_type: str, today: str) -> List[Dict[str, Any]]:
        result = self.supabase.table("daily_tasks")\
            .select("id, created_at")\
            .eq("user_id", user_id)\
            .eq("task_type", task_type)\
            .eq("completed_date", today)\
            .execute()
        return result.data or []

    def _delete_task(self, task_id: str):
        try:
            self.supabase.table("daily_tasks").delete().eq("id", task_id).execute()
        except Exception as e:
            logger.error(f"Could not remove unpaid task {task_id}: {e}")
