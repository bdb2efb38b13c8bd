import itertools
import re
import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from skillswap.main import app
from skillswap.database.supabase_client import get_supabase
from skillswap.modules.auth.service import clear_auth_cache

_EMBED_RE = re.compile(r"^(?P<alias>\w+):(?P<table>\w+)(?:!(?P<fk>\w+))?\(\*\)$")


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Just enough of the postgrest query builder for the services under test"""

    def __init__(self, db, table):
        self.db = db
        self.table_name = table
        self.action = "select"
        self.columns = "*"
        self.payload = None
        self.filters = []
        self.orders = []
        self.row_limit = None

    def select(self, columns="*"):
        self.action = "select"
        self.columns = columns
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.action = "update"
        self.payload = payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def gte(self, column, value):
        self.filters.append(lambda row: row.get(column) is not None and row.get(column) >= value)
        return self

    def or_(self, expression):
        clauses = []
        for part in expression.split(","):
            column, op, value = part.split(".", 2)
            assert op == "eq"
            clauses.append((column, value))
        self.filters.append(lambda row: any(row.get(c) == v for c, v in clauses))
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def execute(self):
        hook = self.db.before_execute.pop((self.table_name, self.action), None)
        if hook:
            hook()
        if (self.table_name, self.action) in self.db.failures:
            raise RuntimeError(f"simulated {self.action} failure on {self.table_name}")
        rows = self.db.tables.setdefault(self.table_name, [])
        if self.action == "insert":
            items = self.payload if isinstance(self.payload, list) else [self.payload]
            created = []
            for item in items:
                row = {"id": str(uuid.uuid4()), "created_at": self.db.next_timestamp()}
                row.update(item)
                rows.append(row)
                created.append(dict(row))
            return FakeResponse(created)

        matched = [row for row in rows if all(f(row) for f in self.filters)]
        if self.action == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse([dict(row) for row in matched])
        if self.action == "delete":
            self.db.tables[self.table_name] = [row for row in rows if row not in matched]
            return FakeResponse([dict(row) for row in matched])

        for column, desc in reversed(self.orders):
            matched = sorted(matched, key=lambda r: r.get(column) or "", reverse=desc)
        if self.row_limit is not None:
            matched = matched[:self.row_limit]
        return FakeResponse([self._project(row) for row in matched])

    def _project(self, row):
        parts = [p.strip() for p in self.columns.split(",") if p.strip()]
        result = dict(row) if "*" in parts else {}
        for part in parts:
            embed = _EMBED_RE.match(part)
            if embed:
                fk = embed.group("fk") or f"{embed.group('alias')}_id"
                target = next(
                    (r for r in self.db.tables.get(embed.group("table"), []) if r["id"] == row.get(fk)),
                    None,
                )
                result[embed.group("alias")] = dict(target) if target else None
            elif part != "*":
                result[part] = row.get(part)
        return result


class FakeAuth:
    def __init__(self):
        self.accounts = {}
        self.tokens = {}

    def register_token(self, user_id, email, token=None):
        token = token or f"token-{user_id}"
        self.tokens[token] = SimpleNamespace(id=user_id, email=email, user_metadata={})
        return token

    def sign_up(self, credentials):
        email = credentials["email"]
        if email in self.accounts:
            raise Exception("User already registered")
        user = SimpleNamespace(
            id=str(uuid.uuid4()),
            email=email,
            user_metadata=credentials.get("options", {}).get("data", {}),
        )
        self.accounts[email] = (user, credentials["password"])
        return SimpleNamespace(user=user, session=None)

    def sign_in_with_password(self, credentials):
        account = self.accounts.get(credentials["email"])
        if not account or account[1] != credentials["password"]:
            raise Exception("Invalid login credentials")
        user = account[0]
        token = self.register_token(user.id, user.email)
        return SimpleNamespace(user=user, session=SimpleNamespace(access_token=token))

    def get_user(self, jwt=None):
        if jwt not in self.tokens:
            raise Exception("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=self.tokens[jwt])

    def sign_out(self):
        return None


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.failures = set()
        # (table, action) -> callable run once just before that query executes
        self.before_execute = {}
        self.auth = FakeAuth()
        self._clock = itertools.count()
        self._epoch = datetime.now(timezone.utc).replace(microsecond=0)

    def table(self, name):
        return FakeQuery(self, name)

    def next_timestamp(self):
        return (self._epoch + timedelta(seconds=next(self._clock))).isoformat()

    def rows(self, name):
        return self.tables.get(name, [])

    def add_user(self, name="Ada Lovelace", college="MIT", role="student", credits=100, bio=None, email=None):
        user_id = str(uuid.uuid4())
        email = email or f"{name.split()[0].lower()}-{user_id[:6]}@college.edu"
        profile = {
            "id": user_id,
            "email": email,
            "name": name,
            "college": college,
            "role": role,
            "credits": credits,
            "bio": bio,
            "avatar_url": None,
            "created_at": self.next_timestamp(),
            "updated_at": None,
        }
        self.tables.setdefault("users", []).append(profile)
        token = self.auth.register_token(user_id, email)
        return profile, {"Authorization": f"Bearer {token}"}

    def add_skill(self, name, category="Programming", description=None):
        row = {
            "id": str(uuid.uuid4()),
            "name": name,
            "category": category,
            "description": description if description is not None else f"{name} skill",
            "created_at": self.next_timestamp(),
        }
        self.tables.setdefault("skills", []).append(row)
        return row

    def add_user_skill(self, user_id, skill_id, skill_type="offered", proficiency_level=3):
        row = {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "skill_id": skill_id,
            "type": skill_type,
            "proficiency_level": proficiency_level,
            "created_at": self.next_timestamp(),
        }
        self.tables.setdefault("user_skills", []).append(row)
        return row

    def balance(self, user_id):
        return next(u["credits"] for u in self.rows("users") if u["id"] == user_id)


@pytest.fixture
def fake_supabase():
    return FakeSupabase()


@pytest.fixture
def client(fake_supabase):
    clear_auth_cache()
    app.dependency_overrides[get_supabase] = lambda: fake_supabase
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_auth_cache()
