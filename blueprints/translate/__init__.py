"""
Translate Blueprint - Translation proxy in front of the model gateway
"""

from flask import Blueprint

translate_bp = Blueprint('translate', __name__, url_prefix='/api')

from . import routes
