# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The Authenticator: owner of the user and session tables.

Both tables are keyed by email (case-sensitive, as given). Every operation
runs its checks in order, first failure wins, and only writes once all checks
pass, so a rejected call never leaves partial state behind.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Dict, Optional

from credman.auth.models import Role, SessionRecord, UserRecord
from credman.auth.passwords import hash_password, verify_password
from credman.auth.results import AuthError, AuthFailure, AuthResult
from credman.auth.tokens import DEFAULT_TOKEN_LENGTH, new_token

logger = logging.getLogger(__name__)


class Authenticator:
    def __init__(self, *, token_length: int = DEFAULT_TOKEN_LENGTH):
        if token_length <= 0:
            raise ValueError(f"Token length must be positive, got {token_length}")
        self.users: Dict[str, UserRecord] = {}
        self.sessions: Dict[str, SessionRecord] = {}
        self.token_length = token_length
        # Guards both tables; checks and writes of one operation happen under it.
        self._lock = threading.RLock()

    def seed_user(self, email: str, record: UserRecord) -> None:
        """Insert a record directly, bypassing the admin gate.

        Bootstrap hook: ``signup`` can never create the first ADMIN.
        """
        with self._lock:
            self.users[email] = record
        logger.info("Seeded %s account for %s", record.role.value, email)

    def _require_user(self, email: str) -> UserRecord:
        user = self.users.get(email)
        if user is None:
            raise AuthFailure(AuthError.USER_NOT_FOUND)
        return user

    def _require_password(self, user: UserRecord, password: str) -> None:
        if not verify_password(user.password_hash, password):
            raise AuthFailure(AuthError.WRONG_PASSWORD)

    def signup(self, name: str, email: str, password: str, admin_email: str) -> AuthResult:
        try:
            with self._lock:
                admin = self.users.get(admin_email)
                if admin is None:
                    raise AuthFailure(AuthError.ADMIN_NOT_FOUND)
                if admin.role is not Role.ADMIN:
                    raise AuthFailure(AuthError.NOT_AUTHORIZED)
                if email in self.users:
                    raise AuthFailure(AuthError.DUPLICATE_USER)

                user = UserRecord(name=name, password_hash=hash_password(password), role=Role.USER)
                self.users[email] = user
        except AuthFailure as e:
            logger.warning("Signup of %s by %s rejected: %s", email, admin_email, e.kind.name)
            return AuthResult.failure(e.kind)

        logger.info("User %s created by %s", email, admin_email)
        return AuthResult.ok("User created", email=email, data=user.public_view())

    def login(self, email: str, password: str) -> AuthResult:
        try:
            with self._lock:
                user = self._require_user(email)
                self._require_password(user, password)

                # An active session is replaced, not rejected.
                token = new_token(self.token_length)
                self.sessions[email] = SessionRecord(token=token, logged_in=True)
        except AuthFailure as e:
            logger.warning("Login of %s rejected: %s", email, e.kind.name)
            return AuthResult.failure(e.kind)

        logger.info("User %s logged in", email)
        return AuthResult.ok("User logged in!", token=token)

    def change_password(self, email: str, old_password: str, new_password: str) -> AuthResult:
        try:
            with self._lock:
                user = self._require_user(email)
                self._require_password(user, old_password)

                # Sessions are left alone: a live token survives the change.
                self.users[email] = UserRecord(
                    name=user.name,
                    password_hash=hash_password(new_password),
                    role=user.role,
                )
        except AuthFailure as e:
            logger.warning("Password change for %s rejected: %s", email, e.kind.name)
            return AuthResult.failure(e.kind)

        logger.info("Password changed for %s", email)
        return AuthResult.ok("Password updated successfully")

    def logout(self, email: str) -> AuthResult:
        try:
            with self._lock:
                session = self.sessions.get(email)
                if session is None:
                    raise AuthFailure(AuthError.NOT_LOGGED_IN)
                if not session.logged_in:
                    raise AuthFailure(AuthError.ALREADY_LOGGED_OUT)
                session.logged_in = False
        except AuthFailure as e:
            logger.warning("Logout of %s rejected: %s", email, e.kind.name)
            return AuthResult.failure(e.kind)

        logger.info("User %s logged out", email)
        return AuthResult.ok("User has been logged out")

    def get_session(self, email: str) -> Optional[SessionRecord]:
        """Snapshot of the session for ``email``; changing it does not touch the table."""
        with self._lock:
            session = self.sessions.get(email)
            return replace(session) if session is not None else None

    def is_logged_in(self, email: str) -> bool:
        session = self.get_session(email)
        return bool(session and session.logged_in)
