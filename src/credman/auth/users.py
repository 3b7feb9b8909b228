# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict

import yaml

from credman.auth.authenticator import Authenticator
from credman.auth.models import Role, UserRecord
from credman.auth.passwords import is_password_hash

logger = logging.getLogger(__name__)

# Anchored to the project root, not the current working directory.
BASE_DIR = Path(__file__).resolve().parents[3]
DEFAULT_USERS_PATH = Path(
    os.getenv("CREDMAN_USERS_PATH", str(BASE_DIR / "data" / "users.yml"))
).resolve()


def load_users(path: Path = DEFAULT_USERS_PATH) -> Dict[str, UserRecord]:
    """Read the bootstrap users file.

    Entries that cannot become a valid record (no email, unknown role, hash
    that is not a SHA-256 hex digest) are skipped with a warning.
    """
    if not path.exists():
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    users = (raw.get("users") or {}) if isinstance(raw, dict) else {}
    if not isinstance(users, dict):
        raise ValueError(f"'users' in {path} must be a mapping of email -> entry")

    out: Dict[str, UserRecord] = {}
    for email, udata in users.items():
        if not isinstance(udata, dict):
            logger.warning("Skipping %r in %s: entry is not a mapping", email, path)
            continue
        e = str(email or "").strip()
        if not e:
            logger.warning("Skipping entry in %s: empty email", path)
            continue
        role = Role.parse(udata.get("role") or "user")
        if role is None:
            logger.warning("Skipping %s in %s: unknown role %r", e, path, udata.get("role"))
            continue
        ph = str(udata.get("password_hash") or "").strip().lower()
        if not is_password_hash(ph):
            logger.warning("Skipping %s in %s: password_hash is not a SHA-256 hex digest", e, path)
            continue
        name = str(udata.get("name") or e).strip()
        out[e] = UserRecord(name=name, password_hash=ph, role=role)
    return out


def bootstrap(authenticator: Authenticator, path: Path = DEFAULT_USERS_PATH) -> int:
    users = load_users(path)
    for email, record in users.items():
        authenticator.seed_user(email, record)
    return len(users)
