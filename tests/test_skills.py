import pytest
from fastapi import HTTPException

from skillswap.modules.skills.schemas import DirectoryEntry
from skillswap.modules.skills.service import SkillService, normalize_skill_lists, filter_directory, unique_in_order


def _entry(skill_name, teacher, college="MIT", category="Programming", description=None):
    return DirectoryEntry(
        id=f"{teacher}-{skill_name}",
        proficiency_level=3,
        skill={"id": skill_name, "name": skill_name, "category": category, "description": description},
        user={"id": teacher, "name": teacher, "college": college, "role": "student"},
    )


def test_normalize_skill_lists_trims_and_dedupes():
    offered, wanted = normalize_skill_lists(["Python", " Python ", "", "Chess"], ["chess", "Chess", "Go"])
    assert offered == ["Python", "Chess"]
    # matching is exact, so a different case is a different skill
    assert wanted == ["chess", "Go"]


def test_unique_in_order_skips_blanks():
    assert unique_in_order(["MIT", None, "Caltech", "MIT", ""]) == ["MIT", "Caltech"]


@pytest.mark.parametrize("search, expected", [
    ("pyth", ["Ada-Python"]),
    ("ADA", ["Ada-Python", "Ada-Guitar"]),
    ("strings", ["Ada-Guitar"]),
    ("", ["Ada-Python", "Ada-Guitar", "Linus-Photography"]),
])
def test_filter_directory_search(search, expected):
    entries = [
        _entry("Python", "Ada"),
        _entry("Guitar", "Ada", category="Music", description="Six strings"),
        _entry("Photography", "Linus", college="Caltech", category="Creative"),
    ]
    assert [e.id for e in filter_directory(entries, search=search)] == expected


def test_filter_directory_college_and_category():
    entries = [
        _entry("Python", "Ada"),
        _entry("Guitar", "Ada", category="Music"),
        _entry("Rust", "Linus", college="Caltech"),
    ]
    result = filter_directory(entries, college="MIT", category="Programming")
    assert [e.id for e in result] == ["Ada-Python"]


def test_directory_endpoint(client, fake_supabase):
    me, headers = fake_supabase.add_user("Viewer")
    ada, _ = fake_supabase.add_user("Ada Lovelace", college="MIT")
    linus, _ = fake_supabase.add_user("Linus T", college="Caltech")
    python = fake_supabase.add_skill("Python")
    guitar = fake_supabase.add_skill("Guitar", category="Music")
    fake_supabase.add_user_skill(ada["id"], python["id"])
    fake_supabase.add_user_skill(linus["id"], guitar["id"])
    fake_supabase.add_user_skill(linus["id"], python["id"], skill_type="wanted")
    # dangling reference is dropped from the directory
    fake_supabase.add_user_skill(linus["id"], "missing-skill")

    r = client.get("/api/v1/skills/directory", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2
    assert body["showing"] == 2
    assert body["colleges"] == ["MIT", "Caltech"]
    assert body["categories"] == ["Programming", "Music"]
    assert "email" not in body["items"][0]["user"]

    r = client.get("/api/v1/skills/directory", params={"college": "Caltech"}, headers=headers)
    body = r.json()
    assert body["total"] == 2
    assert body["showing"] == 1
    assert body["items"][0]["skill"]["name"] == "Guitar"
    assert body["colleges"] == ["MIT", "Caltech"]


def test_add_and_remove_my_skill(client, fake_supabase):
    me, headers = fake_supabase.add_user()

    r = client.post("/api/v1/skills/mine", json={"skill_name": "Chess", "type": "wanted"}, headers=headers)
    assert r.status_code == 201
    added = r.json()
    assert added["proficiency_level"] == 1
    assert added["skill"]["category"] == "General"

    dup = client.post("/api/v1/skills/mine", json={"skill_name": "Chess", "type": "wanted"}, headers=headers)
    assert dup.status_code == 409

    offered = client.post(
        "/api/v1/skills/mine", json={"skill_name": "Chess", "type": "offered", "proficiency_level": 5}, headers=headers
    )
    assert offered.status_code == 201
    assert len(fake_supabase.rows("skills")) == 1

    mine = client.get("/api/v1/skills/mine", headers=headers).json()
    assert [s["skill"]["name"] for s in mine["wanted"]] == ["Chess"]
    assert mine["offered"][0]["proficiency_level"] == 5

    assert client.delete(f"/api/v1/skills/mine/{added['id']}", headers=headers).status_code == 204
    assert client.delete(f"/api/v1/skills/mine/{added['id']}", headers=headers).status_code == 404


def test_cannot_remove_someone_elses_skill(client, fake_supabase):
    _, headers = fake_supabase.add_user("Mallory")
    other, _ = fake_supabase.add_user("Ada")
    skill = fake_supabase.add_skill("Python")
    link = fake_supabase.add_user_skill(other["id"], skill["id"])

    r = client.delete(f"/api/v1/skills/mine/{link['id']}", headers=headers)
    assert r.status_code == 404
    assert len(fake_supabase.rows("user_skills")) == 1


def test_proficiency_out_of_range(client, fake_supabase):
    _, headers = fake_supabase.add_user()
    r = client.post(
        "/api/v1/skills/mine", json={"skill_name": "Chess", "type": "offered", "proficiency_level": 9}, headers=headers
    )
    assert r.status_code == 422


def test_catalog_and_lookup(client, fake_supabase):
    _, headers = fake_supabase.add_user()
    fake_supabase.add_skill("Python")
    guitar = fake_supabase.add_skill("Guitar", category="Music")

    names = [s["name"] for s in client.get("/api/v1/skills", headers=headers).json()]
    assert names == ["Guitar", "Python"]
    music = client.get("/api/v1/skills", params={"category": "Music"}, headers=headers).json()
    assert [s["id"] for s in music] == [guitar["id"]]

    assert client.get(f"/api/v1/skills/{guitar['id']}", headers=headers).json()["name"] == "Guitar"
    assert client.get("/api/v1/skills/nope", headers=headers).status_code == 404


def test_reference_data_is_public(client):
    r = client.get("/api/v1/skills/reference")
    assert r.status_code == 200
    body = r.json()
    assert "MIT" in body["colleges"]
    assert "Programming" in body["categories"]
    assert body["roles"] == ["student", "instructor", "staff"]


@pytest.mark.parametrize("skill_name", ["", "   ", "\t"])
def test_blank_skill_name_rejected(client, fake_supabase, skill_name):
    _, headers = fake_supabase.add_user()
    r = client.post("/api/v1/skills/mine", json={"skill_name": skill_name, "type": "offered"}, headers=headers)
    assert r.status_code == 422
    assert fake_supabase.rows("skills") == []
    assert fake_supabase.rows("user_skills") == []


def test_skill_name_is_trimmed(client, fake_supabase):
    _, headers = fake_supabase.add_user()
    r = client.post("/api/v1/skills/mine", json={"skill_name": "  Chess ", "type": "offered"}, headers=headers)
    assert r.status_code == 201
    assert [s["name"] for s in fake_supabase.rows("skills")] == ["Chess"]


def test_attach_skill_rejects_blank_name(fake_supabase):
    user, _ = fake_supabase.add_user()
    with pytest.raises(HTTPException) as exc:
        SkillService(fake_supabase).attach_skill(user["id"], "   ", "wanted")
    assert exc.value.status_code == 400
    assert fake_supabase.rows("skills") == []
