"""
Name: Admin Bootstrap Script

Responsibilities:
  - Create the first admin user with a seeded profile (idempotent)
  - Use the configured repositories (PostgreSQL when DATABASE_URL is set)
  - Optionally print a signed access token for local use (--print-token)
"""

from __future__ import annotations

import argparse
import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from app.application.usecases import ProvisionUserUseCase  # noqa: E402
from app.container import get_profile_repository, get_user_repository  # noqa: E402
from app.crosscutting.config import get_settings  # noqa: E402
from app.identity.auth import create_access_token  # noqa: E402
from app.identity.users import UserRole  # noqa: E402
from app.infrastructure.db.pool import close_pool, init_pool  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "--":
        argv = argv[1:]
    parser = argparse.ArgumentParser(
        description="Create the first admin user (idempotent)."
    )
    parser.add_argument("--username", required=True, help="Unique username")
    parser.add_argument("--email", required=True, help="User email (normalized)")
    parser.add_argument(
        "--role",
        default=UserRole.ADMIN.value,
        choices=[role.value for role in UserRole],
        help="User role (default: admin)",
    )
    parser.add_argument(
        "--print-token",
        action="store_true",
        help="Print an access token for the user",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = get_settings()
    if not settings.uses_postgres():
        print("Warning: no DATABASE_URL, the user only lives in this process.")
    else:
        init_pool(
            database_url=settings.database_url,
            min_size=1,
            max_size=2,
        )

    try:
        users = get_user_repository()
        existing = users.get_by_username(args.username.strip())
        if existing:
            print(
                "User already exists: "
                f"id={existing.id} username={existing.username} role={existing.role.value}"
            )
            user = existing
        else:
            result = ProvisionUserUseCase(users, get_profile_repository()).execute(
                username=args.username,
                email=args.email,
                role=UserRole(args.role),
            )
            if result.error:
                raise SystemExit(f"{result.error.code.value}: {result.error.message}")
            user = result.user
            print(f"Created user: id={user.id} username={user.username} role={user.role.value}")

        if args.print_token:
            print(create_access_token(user))
    finally:
        if settings.uses_postgres():
            close_pool()


if __name__ == "__main__":
    main()
