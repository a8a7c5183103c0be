"""
Security Module - Client IP tracking, rate limiting, credentials and synthetic emails
"""

import re
import time
from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash


# Accepted request times per (client ip, endpoint)
_request_log = {}
_last_prune = 0.0

USERNAME_PATTERN = re.compile(r'^[A-Za-z0-9_.-]+$')


def get_client_ip():
    """Client IP, honouring the first X-Forwarded-For hop"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def check_rate_limit(endpoint='contact'):
    """
    Record a request and report whether the client is within its limit

    Only requests accepted inside the last RATE_LIMIT_WINDOW seconds count
    against RATE_LIMIT_MAX_REQUESTS; rejected requests are not recorded.
    """
    limit = current_app.config.get('RATE_LIMIT_MAX_REQUESTS', 10)
    window = current_app.config.get('RATE_LIMIT_WINDOW', 60)
    now = time.time()
    if now - _last_prune >= window:
        prune_rate_limits(now, window)
    key = (get_client_ip(), endpoint)

    recent = [ts for ts in _request_log.get(key, ()) if now - ts < window]
    allowed = len(recent) < limit
    if allowed:
        recent.append(now)
    else:
        current_app.logger.warning(f"Rate limit exceeded for {key[0]} on {endpoint}")
    _request_log[key] = recent
    return allowed


def prune_rate_limits(now, window):
    """Drop clients with no accepted request inside the window"""
    global _last_prune
    _last_prune = now
    stale = [key for key, times in _request_log.items() if not times or now - times[-1] >= window]
    for key in stale:
        del _request_log[key]


def reset_rate_limits():
    global _last_prune
    _last_prune = 0.0
    _request_log.clear()


def get_admin_credentials():
    """Load bootstrap admin credentials from configuration"""
    username = current_app.config.get('ADMIN_USERNAME')
    password = current_app.config.get('ADMIN_PASSWORD')
    if not username or not password:
        return {'username': None, 'password': None}
    return {'username': username, 'password': password}


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """True when ``password`` matches the stored werkzeug hash"""
    return check_password_hash(password_hash, password)


def synthetic_email(username):
    """Map a username onto the email identity the auth store keeps"""
    domain = current_app.config.get('AUTH_EMAIL_DOMAIN', 'portfolio.local')
    return f"{username.strip().lower()}@{domain}"


def validate_credentials(username, password):
    """
    Validate sign-up input

    Returns:
        str | None: Error message, or None when the input is acceptable
    """
    min_username = current_app.config.get('USERNAME_MIN_LENGTH', 3)
    min_password = current_app.config.get('PASSWORD_MIN_LENGTH', 6)

    if len(username) < min_username:
        return f'Username must be at least {min_username} characters'
    if not USERNAME_PATTERN.match(username):
        return 'Username may only contain letters, numbers, dots, dashes and underscores'
    if len(password) < min_password:
        return f'Password must be at least {min_password} characters'
    return None


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits',
    'prune_rate_limits',
    'get_admin_credentials',
    'hash_password',
    'verify_password',
    'synthetic_email',
    'validate_credentials'
]
