"""CLI commands for fitplan."""

from .init import init
from .plans import plans
from .serve import serve
from .users import users

__all__ = [
    "init",
    "plans",
    "serve",
    "users",
]
