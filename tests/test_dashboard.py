from datetime import timedelta

from skillswap.core.time_utils import utc_today
from skillswap.modules.credits.service import CreditService


def test_dashboard_aggregates(client, fake_supabase):
    me, headers = fake_supabase.add_user("Dana Dashboard", credits=100)
    teacher, _ = fake_supabase.add_user("Tom Teacher")
    python = fake_supabase.add_skill("Python")
    guitar = fake_supabase.add_skill("Guitar", category="Music")
    fake_supabase.add_user_skill(me["id"], python["id"], "offered")
    fake_supabase.add_user_skill(me["id"], guitar["id"], "wanted", proficiency_level=1)

    for day in range(1, 8):
        client.post("/api/v1/meetups", headers=headers, json={
            "teacher_id": teacher["id"],
            "skill_id": guitar["id"],
            "scheduled_date": (utc_today() + timedelta(days=day)).isoformat(),
            "scheduled_time": "10:00",
            "credits_offered": 10,
        })
    CreditService(fake_supabase).earn(me["id"], 5, "Daily login bonus")

    r = client.get("/api/v1/dashboard", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["name"] == "Dana Dashboard"
    assert body["counts"] == {
        "credits": 35,
        "offered_skills": 1,
        "wanted_skills": 1,
        "upcoming_meetups": 5,
    }
    assert body["offered_skills"][0]["skill"]["name"] == "Python"
    assert body["upcoming_meetups"][0]["title"] == "Learn Guitar"
    assert body["upcoming_meetups"][0]["skill"]["name"] == "Guitar"
    assert len(body["recent_transactions"]) == 5
    assert body["recent_transactions"][0]["description"] == "Daily login bonus"


def test_dashboard_requires_auth(client):
    assert client.get("/api/v1/dashboard").status_code in (401, 403)
