# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Structured outcomes of the Authenticator operations.

Expected failures (unknown admin, wrong password, ...) are not exceptions for
callers: every operation returns an ``AuthResult``. ``AuthFailure`` is only
raised inside the Authenticator and converted at the operation boundary, or
on demand through ``AuthResult.raise_for_error()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from credman.auth.models import UserPublicView


class AuthError(Enum):
    """Failure kinds, one stable message each.

    Unknown emails read "User does not exist" and a bad password reads
    "Wrong password" for every operation. Older callers matching on
    "Email does not exist" (login) or "Old password does not match"
    (password change) must match on these instead, or on the kind.
    """

    ADMIN_NOT_FOUND = "Admin does not exist"
    NOT_AUTHORIZED = "You are not authorized to do that!"
    DUPLICATE_USER = "User with this email already exists"
    USER_NOT_FOUND = "User does not exist"
    WRONG_PASSWORD = "Wrong password"
    NOT_LOGGED_IN = "User is not logged in"
    ALREADY_LOGGED_OUT = "User is already logged out"

    @property
    def message(self) -> str:
        return self.value


class AuthFailure(Exception):
    def __init__(self, kind: AuthError):
        super().__init__(kind.message)
        self.kind = kind


@dataclass(frozen=True)
class AuthResult:
    success: bool
    message: Optional[str] = None
    token: Optional[str] = None
    email: Optional[str] = None
    data: Optional[UserPublicView] = None
    error: Optional[str] = None
    kind: Optional[AuthError] = None

    @classmethod
    def ok(
        cls,
        message: str,
        *,
        token: Optional[str] = None,
        email: Optional[str] = None,
        data: Optional[UserPublicView] = None,
    ) -> "AuthResult":
        return cls(success=True, message=message, token=token, email=email, data=data)

    @classmethod
    def failure(cls, kind: AuthError) -> "AuthResult":
        return cls(success=False, error=kind.message, kind=kind)

    def __bool__(self) -> bool:
        return self.success

    def raise_for_error(self) -> "AuthResult":
        if not self.success and self.kind is not None:
            raise AuthFailure(self.kind)
        return self

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        out: Dict[str, Any] = {"success": True}
        if self.message is not None:
            out["message"] = self.message
        if self.token is not None:
            out["token"] = self.token
        if self.email is not None:
            out["email"] = self.email
        if self.data is not None:
            out["data"] = self.data.to_dict()
        return out
