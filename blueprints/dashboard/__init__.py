"""
Dashboard Blueprint - Admin content management
Handles: Profile, sections, resume, contact messages, testimonial moderation, users
"""

from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__, url_prefix='/dashboard')

from . import routes
