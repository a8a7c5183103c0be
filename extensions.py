"""
Shared Flask extension instances, bound to the app in create_app()
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

db = SQLAlchemy()

login_manager = LoginManager()
login_manager.session_protection = 'basic'

__all__ = ['db', 'login_manager']
