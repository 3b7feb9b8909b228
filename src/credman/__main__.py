"""credman entrypoint.

Run with:
  python -m credman

Seeds the bootstrap users (or a default admin) and plays the reference
signup / login / password change / logout sequence, logging every result.
"""

import logging
import os

from credman.auth.authenticator import Authenticator
from credman.auth.models import Role, UserRecord
from credman.auth.passwords import hash_password
from credman.auth.users import DEFAULT_USERS_PATH, bootstrap

logger = logging.getLogger("credman")

DEFAULT_ADMIN_EMAIL = "admin@example.com"


def run_scenario(auth: Authenticator, admin_email: str = DEFAULT_ADMIN_EMAIL) -> list:
    user = "john@example.com"
    steps = [
        ("Signup", lambda: auth.signup("John Doe", user, "password123", admin_email)),
        ("Duplicate signup", lambda: auth.signup("John Doe", user, "password123", admin_email)),
        ("Login", lambda: auth.login(user, "password123")),
        ("Login with wrong password", lambda: auth.login(user, "wrongpass")),
        ("Change password", lambda: auth.change_password(user, "password123", "newpass456")),
        ("Login after password change", lambda: auth.login(user, "newpass456")),
        ("Logout", lambda: auth.logout(user)),
        ("Logout again", lambda: auth.logout(user)),
        ("Unauthorized signup", lambda: auth.signup("Fake", "fake@example.com", "1234", user)),
    ]
    results = []
    for label, step in steps:
        result = step()
        logger.info("%s: %s", label, result.to_dict())
        results.append(result)
    return results


def main() -> None:
    level = os.getenv("CREDMAN_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    auth = Authenticator()
    seeded = bootstrap(auth, DEFAULT_USERS_PATH)
    admin = next((e for e, u in auth.users.items() if u.role is Role.ADMIN), None)
    if admin is None:
        logger.info("No admin in %s (%d users loaded); seeding %s", DEFAULT_USERS_PATH, seeded, DEFAULT_ADMIN_EMAIL)
        admin = DEFAULT_ADMIN_EMAIL
        auth.seed_user(admin, UserRecord(name="Admin", password_hash=hash_password("admin123"), role=Role.ADMIN))

    run_scenario(auth, admin)


if __name__ == "__main__":
    main()
