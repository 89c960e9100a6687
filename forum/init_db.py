# init_db.py
import argparse
import os

from forum.database import SessionLocal, create_tables
from forum.utils.auth import create_admin
import forum.models  # noqa: F401


def init_database(admin_email=None, admin_password=None):
    """Initialize database, optionally seeding an administrator"""
    print(" Creating database tables...")
    create_tables()

    if admin_email and admin_password:
        db = SessionLocal()
        try:
            admin = create_admin(db, admin_email, admin_password)
            print(f" Admin user {admin.email} created (id={admin.id})")
        finally:
            db.close()

    print(" Database initialized!")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the forum tables")
    parser.add_argument("--admin-email", default=os.getenv("ADMIN_EMAIL"))
    parser.add_argument("--admin-password", default=os.getenv("ADMIN_PASSWORD"))
    args = parser.parse_args(argv)
    init_database(args.admin_email, args.admin_password)


if __name__ == "__main__":
    main()
