"""
Testimonials Blueprint - Visitor endorsements
Handles: Public approved list, own submissions, new submissions
"""

from flask import Blueprint

testimonials_bp = Blueprint('testimonials', __name__, url_prefix='/api/testimonials')

from . import routes
