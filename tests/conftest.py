import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

from pathlib import Path

import pytest
import yaml

from credman.auth.authenticator import Authenticator
from credman.auth.models import Role, UserRecord
from credman.auth.passwords import hash_password

ADMIN_EMAIL = "admin@x"
ADMIN_PASSWORD = "admin123"


@pytest.fixture()
def auth() -> Authenticator:
    """An Authenticator with one bootstrap admin (admin@x / admin123)."""
    a = Authenticator()
    a.seed_user(ADMIN_EMAIL, UserRecord(name="Admin", password_hash=hash_password(ADMIN_PASSWORD), role=Role.ADMIN))
    return a


@pytest.fixture()
def users_file(tmp_path: Path):
    """Write a users.yml under tmp_path/data from a dict of entries and return its path."""
    data_dir = tmp_path / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / "users.yml"

    def _write(users: dict) -> Path:
        path.write_text(yaml.safe_dump({"version": 1, "users": users}, sort_keys=False), encoding="utf-8")
        return path

    return _write
