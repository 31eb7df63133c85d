# scripts/setup/create_admin.py
"""
Create the first ADMIN account so the dashboard can be logged into.
Usage: python scripts/setup/create_admin.py <username> [password]
If the password is omitted it is prompted for (not echoed).
"""

import sys
import os
import getpass
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from app.database import SessionLocal, create_tables
from app.exceptions import DuplicateUsername, ValidationFailed
from app.services.user_service import create_user


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/setup/create_admin.py <username> [password]")
        sys.exit(2)

    username = sys.argv[1]
    password = sys.argv[2] if len(sys.argv) > 2 else getpass.getpass("Password: ")

    create_tables()
    db = SessionLocal()
    try:
        user = create_user(db, username, password, role="ADMIN")
        print(f"Admin user created: id={user.id} username={user.username}")
    except DuplicateUsername as e:
        print(f"{e}")
        sys.exit(1)
    except ValidationFailed as e:
        for field, message in e.errors.items():
            print(f"{field}: {message}")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
