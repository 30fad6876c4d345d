"""User data model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """A registered user.

    Users are provisioned out of band (see ``fitplan users add``); the HTTP
    surface only reads them.
    """

    email: str
    name: str = ""
    password_hash: str | None = None
    profile_pic: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self, include_password: bool = True) -> dict:
        """Convert to the JSON shape returned by the API."""
        data = {
            "_id": self.id,
            "email": self.email,
            "name": self.name,
            "profilePic": self.profile_pic,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_password:
            data["password"] = self.password_hash
        return data
