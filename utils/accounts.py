"""
Accounts Module - Username accounts on top of the email-keyed auth records
"""

from flask import current_app
from extensions import db
from models import User, Profile, UserRole
from .security import hash_password, synthetic_email, get_admin_credentials


class AccountError(Exception):
    """Sign-up rejected (duplicate username, bad input)"""


def find_account(identifier):
    """Find a user by username or by its synthetic email"""
    if not identifier:
        return None
    identifier = identifier.strip()
    email = identifier.lower() if '@' in identifier else synthetic_email(identifier)
    return User.query.filter_by(email=email).first()


def create_account(username, password, role='user'):
    """
    Create auth record, profile and role for a username

    Raises:
        AccountError: If the username is already taken
    """
    username = username.strip()
    if Profile.query.filter(db.func.lower(Profile.username) == username.lower()).first() \
            or find_account(username):
        raise AccountError('Username is already taken')

    user = User(email=synthetic_email(username), password_hash=hash_password(password))
    db.session.add(user)
    db.session.flush()
    db.session.add(Profile(user_id=user.id, username=username))
    db.session.add(UserRole(user_id=user.id, role='user'))
    if role == 'admin':
        db.session.add(UserRole(user_id=user.id, role='admin'))
    db.session.commit()
    current_app.logger.info(f"Created account {username} ({user.email})")
    return user


def set_admin_role(user, is_admin):
    """Grant or revoke the admin role"""
    existing = UserRole.query.filter_by(user_id=user.id, role='admin').first()
    if is_admin and not existing:
        db.session.add(UserRole(user_id=user.id, role='admin'))
    elif not is_admin and existing:
        db.session.delete(existing)
    db.session.commit()


def ensure_admin_account():
    """Create or promote the configured bootstrap admin account"""
    credentials = get_admin_credentials()
    username = credentials['username']
    if not username:
        current_app.logger.info("No bootstrap admin configured")
        return None

    user = find_account(username)
    if user is None:
        user = create_account(username, credentials['password'], role='admin')
        current_app.logger.info(f"✓ Bootstrap admin {username} created")
    elif not user.is_admin:
        set_admin_role(user, True)
        current_app.logger.info(f"✓ Bootstrap admin {username} promoted")
    return user
