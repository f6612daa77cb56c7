"""
Create a user or change an existing user's role (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user EMAIL [NAME] [--role admin|user]
Example:
  python -m app.scripts.create_user admin@example.com "Hall Admin" --role admin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.models.user import ROLE_USER, ROLES
from app.services.users import register_user


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a HallPoint user or set their role.")
    parser.add_argument("email", help="User email (3-320 chars)")
    parser.add_argument("name", nargs="?", default="", help="Display name")
    parser.add_argument("--role", default=ROLE_USER, choices=list(ROLES))
    args = parser.parse_args()

    email = args.email.strip()
    if len(email) < 3 or len(email) > 320 or "@" not in email:
        print("Invalid email.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user, inserted = register_user(db, email, name=args.name.strip())
        if user.role != args.role:
            user.role = args.role
            db.commit()
        verb = "Created" if inserted else "Updated"
        print(f"{verb} user '{email}' with role '{user.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
