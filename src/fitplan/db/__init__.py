"""Database layer for fitplan."""

from .engine import get_db_path, init_db, new_object_id
from .repositories import PlanRepository, UserRepository

__all__ = [
    "get_db_path",
    "init_db",
    "new_object_id",
    "PlanRepository",
    "UserRepository",
]
