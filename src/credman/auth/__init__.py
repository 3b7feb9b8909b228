# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Credential and session management.

This package provides:
- Password hashing/verification (SHA-256 hex digests)
- Session token generation (secrets)
- The Authenticator owning the user and session tables
- User store loading from data/users.yml for the bootstrap admin
"""

from credman.auth.authenticator import Authenticator
from credman.auth.models import Role, SessionRecord, UserPublicView, UserRecord
from credman.auth.results import AuthError, AuthFailure, AuthResult

__all__ = [
    "Authenticator",
    "AuthError",
    "AuthFailure",
    "AuthResult",
    "Role",
    "SessionRecord",
    "UserPublicView",
    "UserRecord",
]
