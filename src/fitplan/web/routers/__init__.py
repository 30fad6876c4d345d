"""HTTP routers."""

from . import auth, fitness

__all__ = ["auth", "fitness"]
