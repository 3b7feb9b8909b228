# Copyright (C) 2026 Bernardo Gómez Bey
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import os
import secrets
import string

TOKEN_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_TOKEN_LENGTH = int(os.getenv("CREDMAN_TOKEN_LENGTH", "32"))


def new_token(length: int = DEFAULT_TOKEN_LENGTH) -> str:
    if length <= 0:
        raise ValueError(f"Token length must be positive, got {length}")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))
