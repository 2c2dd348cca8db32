#!/usr/bin/env python3
"""
Script to create the first ADMIN user in the database.
This should be run after the initial migration.
"""

from sqlalchemy.orm import Session

from app.auth.password import hash_password
from app.crud.user import create_user, get_user_by_email
from app.database import SessionLocal
from app.models.user import User, UserRole


def create_admin_user():
    """Create the first ADMIN user"""
    db: Session = SessionLocal()

    try:
        # Check if an ADMIN user already exists
        existing_admin = db.query(User).filter(User.role == UserRole.ADMIN).first()

        if existing_admin:
            print(f"ADMIN user already exists: {existing_admin.email}")
            return

        admin_email = input("Enter email for ADMIN user: ").strip()
        admin_password = input("Enter password for ADMIN user: ").strip()
        admin_name = input("Enter name for ADMIN user: ").strip()
        admin_phone = input("Enter phone for ADMIN user (optional): ").strip() or None

        if not all([admin_email, admin_password, admin_name]):
            print("Email, password and name are required!")
            return

        if get_user_by_email(db, admin_email):
            print(f"User with email {admin_email} already exists!")
            return

        admin_user = create_user(
            db,
            email=admin_email,
            password_hash=hash_password(admin_password),
            name=admin_name,
            role=UserRole.ADMIN,
            phone=admin_phone,
        )
        db.commit()
        db.refresh(admin_user)

        print("ADMIN user created successfully!")
        print(f"Email: {admin_user.email}")
        print(f"ID: {admin_user.id}")

    except Exception as e:
        print(f"Error creating ADMIN user: {str(e)}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    create_admin_user()
