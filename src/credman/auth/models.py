# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Role(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"

    @classmethod
    def parse(cls, value: str) -> Optional["Role"]:
        v = str(value or "").strip().upper()
        try:
            return cls(v)
        except ValueError:
            return None


@dataclass(frozen=True)
class UserRecord:
    name: str
    password_hash: str
    role: Role

    def public_view(self) -> "UserPublicView":
        return UserPublicView(name=self.name, role=self.role)


@dataclass
class SessionRecord:
    token: str
    logged_in: bool = True


@dataclass(frozen=True)
class UserPublicView:
    """What a caller may see of a user: never the hash."""

    name: str
    role: Role

    def to_dict(self) -> dict:
        return {"name": self.name, "role": self.role.value}
