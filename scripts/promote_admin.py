#!/usr/bin/env python3
"""
Filmoteka • Promote / demote a user
===================================

Registration always creates `default`-role users; this is the out-of-band
way to grant (or revoke) the `admin` role.

Usage
-----
    python scripts/promote_admin.py alice
    python scripts/promote_admin.py alice --role default
"""

import argparse
import asyncio
import sys

from sqlalchemy import update

from filmoteka.db.models.user import User
from filmoteka.db.session import async_engine, transactional_async_session
from filmoteka.schemas.enums import UserRole


async def set_role(username: str, role: UserRole) -> bool:
    """Set `role` on `username`; False if no such user."""
    async with transactional_async_session() as db:
        result = await db.execute(
            update(User).where(User.username == username).values(role=role.value)
        )
    await async_engine.dispose()
    return result.rowcount > 0


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("username", help="Existing username")
    ap.add_argument("--role", choices=[r.value for r in UserRole], default=UserRole.ADMIN.value)
    args = ap.parse_args()

    if not asyncio.run(set_role(args.username, UserRole(args.role))):
        print(f"No such user: {args.username}")
        sys.exit(1)
    print(f"{args.username} is now {args.role}")


if __name__ == "__main__":
    main()
