"""
Auth Routes - Authentication and authorization
"""

from datetime import datetime
from flask import current_app
from flask_login import login_user, logout_user, current_user
from extensions import db
from utils.accounts import AccountError, create_account, find_account
from utils.data import user_to_dict
from utils.decorators import login_required
from utils.helpers import success_response, error_response, get_payload, clean_str
from utils.security import check_rate_limit, get_client_ip, validate_credentials, verify_password
from . import auth_bp


def _password(payload):
    """Password from the payload; anything but a string counts as missing"""
    password = payload.get('password')
    return password if isinstance(password, str) else ''


@auth_bp.route('/signup', methods=['POST'])
def signup():
    """Create an account from a username and password"""
    if not check_rate_limit('signup'):
        return error_response('Too many requests.', 429)

    payload = get_payload()
    username = clean_str(payload.get('username'), 255)
    password = _password(payload)

    error = validate_credentials(username, password)
    if error:
        return error_response(error, 400)

    try:
        user = create_account(username, password)
    except AccountError as e:
        db.session.rollback()
        return error_response(str(e), 409)
    except Exception as e:
        current_app.logger.error(f"Sign-up error for {username}: {str(e)}")
        db.session.rollback()
        return error_response('Sign up failed. Please try again.', 500)

    login_user(user)
    current_app.logger.info(f"New account {username} from {get_client_ip()}")
    return success_response('Your account has been created.', 201, user=user_to_dict(user))


@auth_bp.route('/login', methods=['POST'])
def login():
    """Username (or synthetic email) and password login"""
    if not check_rate_limit('login'):
        return error_response('Too many requests.', 429)

    payload = get_payload()
    identifier = clean_str(payload.get('username') or payload.get('email'), 255)
    password = _password(payload)
    remember = str(payload.get('remember', '')).lower() in ('1', 'true', 'on', 'yes')

    user = find_account(identifier) if identifier else None
    if not user or not verify_password(password, user.password_hash):
        current_app.logger.warning(f"Failed login for {identifier!r} from {get_client_ip()}")
        return error_response('Invalid credentials. Please try again.', 401)

    try:
        user.last_sign_in_at = datetime.utcnow()
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Could not record sign-in for {identifier}: {str(e)}")
        db.session.rollback()

    login_user(user, remember=remember)
    current_app.logger.info(f"User {user.username} logged in")
    return success_response(f'Welcome back, {user.username}!', user=user_to_dict(user))


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """Logout current user"""
    username = current_user.username
    logout_user()
    current_app.logger.info(f"User {username} logged out")
    return success_response('Logged out successfully')


@auth_bp.route('/session')
def session_status():
    """Current authentication state"""
    if not current_user.is_authenticated:
        return success_response(authenticated=False, user=None)
    return success_response(authenticated=True, user=user_to_dict(current_user))
