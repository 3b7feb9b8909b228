# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import hashlib
import hmac
import re

DIGEST_HEX_LENGTH = 64

_HEX_DIGEST_RE = re.compile(r"^[0-9a-f]{64}$")


def hash_password(plain: str) -> str:
    """SHA-256 of the UTF-8 bytes, as 64 lowercase hex characters."""
    return hashlib.sha256(plain.encode("utf-8")).hexdigest()


def verify_password(hash_value: str, plain: str) -> bool:
    if not hash_value:
        return False
    return hmac.compare_digest(hash_value, hash_password(plain))


def is_password_hash(value: str) -> bool:
    return bool(_HEX_DIGEST_RE.match(value or ""))
