from skillswap.config.settings import Settings
from skillswap.config.catalog_config import COMPLETABLE_TASKS, get_skill_seed_rows
from skillswap.scripts.seed_skills import seed_skills


def test_probes_are_public(client):
    assert client.get("/").json()["status"] == "healthy"
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/ready").json() == {"status": "ready"}


def test_security_headers(client):
    r = client.get("/health")
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"


def test_settings_parsing(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, ,http://b.test")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("STARTING_CREDITS", "50")
    s = Settings(_env_file=None)
    assert s.get_cors_origins_list() == ["http://a.test", "http://b.test"]
    assert s.is_production
    assert s.starting_credits == 50


def test_completable_tasks():
    assert COMPLETABLE_TASKS == {
        "daily_login": {"credits": 5, "description": "Daily login bonus", "opportunity_id": "daily-login"},
    }


def test_seed_skills_is_idempotent(fake_supabase):
    fake_supabase.add_skill("Python", category="General")

    first = seed_skills(fake_supabase)
    assert first == {"created": len(get_skill_seed_rows()) - 1, "updated": 1}
    python = next(s for s in fake_supabase.rows("skills") if s["name"] == "Python")
    assert python["category"] == "Programming"

    second = seed_skills(fake_supabase)
    assert second == {"created": 0, "updated": len(get_skill_seed_rows())}
