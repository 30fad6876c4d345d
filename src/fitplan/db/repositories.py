"""Data access layer for fitplan."""

import json
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from ..models.plan import DietPlan, Plan, WorkoutPlan
from ..models.user import User
from .engine import get_db_path, new_object_id


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class UserRepository:
    """Repository for users."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, user: User) -> str:
        """Create a new user and return its identifier."""
        user_id = new_object_id()
        now = _now()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO users
                (id, email, name, password_hash, profile_pic, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user_id,
                    user.email,
                    user.name,
                    user.password_hash,
                    user.profile_pic,
                    now.isoformat(),
                    now.isoformat(),
                ),
            )
            await db.commit()
        user.id = user_id
        user.created_at = now
        user.updated_at = now
        return user_id

    async def get(self, user_id: str) -> User | None:
        """Get a user by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email address."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users WHERE email = ?", (email,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def list_all(self) -> list[User]:
        """List all users."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM users ORDER BY created_at")
            rows = await cursor.fetchall()
            return [self._row_to_user(row) for row in rows]

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        return User(
            id=row["id"],
            email=row["email"],
            name=row["name"] or "",
            password_hash=row["password_hash"],
            profile_pic=row["profile_pic"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class PlanRepository:
    """Repository for generated plans. Plans are only ever inserted."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, plan: Plan) -> str:
        """Insert a plan and return its identifier."""
        plan_id = new_object_id()
        now = _now()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO plans
                (id, user_id, name, email, image, workout_plan, diet_plan,
                 is_active, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    plan_id,
                    plan.user_id,
                    plan.name,
                    plan.email,
                    plan.image,
                    json.dumps(plan.workout_plan.to_dict()),
                    json.dumps(plan.diet_plan.to_dict()),
                    int(plan.is_active),
                    now.isoformat(),
                    now.isoformat(),
                ),
            )
            await db.commit()
        plan.id = plan_id
        plan.created_at = now
        plan.updated_at = now
        return plan_id

    async def get(self, plan_id: str) -> Plan | None:
        """Get a plan by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM plans WHERE id = ?", (plan_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_plan(row)

    async def list_by_user(self, user_id: str) -> list[Plan]:
        """List a user's plans, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM plans WHERE user_id = ? ORDER BY created_at DESC",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_plan(row) for row in rows]

    def _row_to_plan(self, row: aiosqlite.Row) -> Plan:
        """Convert a database row to a Plan."""
        return Plan(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            email=row["email"],
            image=row["image"] or "",
            workout_plan=WorkoutPlan.from_dict(json.loads(row["workout_plan"])),
            diet_plan=DietPlan.from_dict(json.loads(row["diet_plan"])),
            is_active=bool(row["is_active"]),
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )
