"""Domain objects: users, posts and comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping


@dataclass
class Comment:
    id: int
    post_id: int
    user_id: int
    created_at: datetime
    content: str

    def to_dict(self) -> dict[str, Any]:
        """Return the comment as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "postID": self.post_id,
            "userID": self.user_id,
            "createdAt": self.created_at.isoformat(),
            "content": self.content,
        }


@dataclass
class Post:
    id: int
    user_id: int
    title: str
    ingress: str
    content: str
    category: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return the post as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "userID": self.user_id,
            "title": self.title,
            "ingress": self.ingress,
            "content": self.content,
            "category": self.category,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass
class User:
    id: int
    name: str
    email: str
    phone_number: str
    address: Mapping[str, Any] | None
    role: str
    created_at: datetime
    last_login: datetime
    preferences: Mapping[str, Any] | None
    post_ids: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the user as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "address": dict(self.address) if self.address is not None else None,
            "role": self.role,
            "createdAt": self.created_at.isoformat(),
            "lastLogin": self.last_login.isoformat(),
            "preferences": (
                dict(self.preferences) if self.preferences is not None else None
            ),
            "postIDs": list(self.post_ids),
        }