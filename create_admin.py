#!/usr/bin/env python3
"""
Script to create an admin account for the Showroom API.
Run this once after setting DATABASE_URL (or with the local SQLite default).
"""

from getpass import getpass

from showroom import create_app
from showroom.errors import DuplicateIdentity
from showroom.extensions import db
from showroom.models import Admin
from showroom.services import get_service


def create_admin_user(username, email, password, role='admin'):
    """
    Create an admin account.

    Args:
        username: Login name (3-50 characters)
        email: Account email address
        password: Plaintext password, hashed before it is stored
        role: admin or moderator
    """
    app = create_app()

    with app.app_context():
        db.create_all()

        existing = Admin.query.filter(
            (Admin.username == username) | (Admin.email == email.lower())
        ).first()
        if existing:
            print(f"❌ Account {existing.username} <{existing.email}> already exists!")
            print(f"   Current role: {existing.role}")
            return None

        try:
            admin = get_service('credentials').create_account(username, email, password, role)
        except DuplicateIdentity as e:
            print(f"❌ {e.message}")
            return None

        print("✅ Admin account created successfully!")
        print(f"   Username: {admin.username}")
        print(f"   Email: {admin.email}")
        print(f"   Role: {admin.role}")
        print("\n🔐 You can now log in at POST /api/admin/login")
        return admin


def main():
    print("=" * 60)
    print("Showroom - Admin Account Creation")
    print("=" * 60)
    print()

    username = input("Username: ").strip()
    email = input("Email: ").strip().lower()
    password = getpass("Password (min 6 characters): ")

    if len(username) < 3 or len(password) < 6 or '@' not in email:
        print("❌ Username needs 3+ characters, password 6+, and a valid email.")
        return

    print()
    print("Creating admin account with:")
    print(f"  Username: {username}")
    print(f"  Email: {email}")
    print()

    confirm = input("Proceed? (yes/no): ").lower()
    if confirm == 'yes':
        create_admin_user(username, email, password)
    else:
        print("❌ Admin creation cancelled.")


if __name__ == '__main__':
    main()
