import logging

import pytest

from credman.auth.authenticator import Authenticator
from credman.auth.models import Role
from credman.auth.passwords import hash_password
from credman.auth.users import bootstrap, load_users


def test_missing_file_yields_no_users(tmp_path):
    assert load_users(tmp_path / "nope.yml") == {}


def test_load_users_parses_roles_and_names(users_file):
    path = users_file(
        {
            "admin@example.com": {"name": "Admin", "role": "admin", "password_hash": hash_password("admin123")},
            "plain@example.com": {"role": "User", "password_hash": hash_password("pw").upper()},
        }
    )
    users = load_users(path)
    assert users["admin@example.com"].role is Role.ADMIN
    assert users["admin@example.com"].name == "Admin"
    assert users["plain@example.com"].role is Role.USER
    # name falls back to the email; hashes are normalised to lowercase
    assert users["plain@example.com"].name == "plain@example.com"
    assert users["plain@example.com"].password_hash == hash_password("pw")


def test_invalid_entries_are_skipped(users_file, caplog):
    caplog.set_level(logging.WARNING, logger="credman")
    path = users_file(
        {
            "bad-role@x": {"role": "root", "password_hash": hash_password("pw")},
            "plaintext@x": {"role": "admin", "password_hash": "admin123"},
            "not-a-mapping@x": "admin",
            "": {"role": "admin", "password_hash": hash_password("pw")},
            "ok@x": {"role": "admin", "password_hash": hash_password("pw")},
        }
    )
    users = load_users(path)
    assert list(users) == ["ok@x"]
    assert "unknown role" in caplog.text
    assert "not a SHA-256 hex digest" in caplog.text
    assert "not a mapping" in caplog.text
    assert "empty email" in caplog.text


def test_users_must_be_a_mapping(tmp_path):
    path = tmp_path / "users.yml"
    path.write_text("users:\n  - admin@x\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_users(path)


def test_bootstrap_seeds_admin_that_can_sign_up_users(users_file):
    path = users_file({"admin@x": {"name": "Admin", "role": "admin", "password_hash": hash_password("admin123")}})
    auth = Authenticator()
    assert bootstrap(auth, path) == 1
    assert auth.login("admin@x", "admin123").success
    r = auth.signup("J", "j@x", "pw", "admin@x")
    assert r.success
    assert r.data.role is Role.USER
