"""
Portfolio Blueprint - Public portfolio views
Handles: Portfolio sections, resume, contact form, UI strings, uploaded files
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes
