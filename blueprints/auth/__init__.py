"""
Auth Blueprint - Authentication and authorization
Handles: Sign-up, Login, Logout, Session status
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

from . import routes
