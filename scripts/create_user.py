"""Utility script to register a user so they can log in."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.errors import DomainError
from app.application.use_cases.users import create_user
from app.domain.entities import USER_ROLE_ADMIN, USER_ROLE_SUPERADMIN, USER_ROLE_USER
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a user for the Ludium Portal API.",
    )
    parser.add_argument("--email", required=True, help="Email the user logs in with")
    parser.add_argument("--first-name", default=None, help="Given name (optional)")
    parser.add_argument("--last-name", default=None, help="Family name (optional)")
    parser.add_argument(
        "--role",
        default=USER_ROLE_USER,
        choices=(USER_ROLE_USER, USER_ROLE_ADMIN, USER_ROLE_SUPERADMIN),
        help="Platform role (default: user)",
    )
    parser.add_argument(
        "--external-id",
        default=None,
        help="Identity provider id, when already known",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            email=args.email,
            first_name=args.first_name,
            last_name=args.last_name,
            role=args.role,
            external_id=args.external_id,
        )
    except DomainError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not save the user: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
