"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import login_required, admin_required
from .data import load_portfolio, load_section, get_or_create_portfolio, SECTIONS
from .notifications import send_admin_notification
from .security import (
    get_client_ip,
    check_rate_limit,
    get_admin_credentials,
    hash_password,
    verify_password,
    synthetic_email
)
from .helpers import success_response, error_response, get_payload
from .i18n import get_language, get_ui_strings
from .translation import Translator, TranslationCache, get_translator, translate_portfolio

__all__ = [
    # Decorators
    'login_required',
    'admin_required',

    # Data
    'load_portfolio',
    'load_section',
    'get_or_create_portfolio',
    'SECTIONS',

    # Notifications
    'send_admin_notification',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'get_admin_credentials',
    'hash_password',
    'verify_password',
    'synthetic_email',

    # Helpers
    'success_response',
    'error_response',
    'get_payload',

    # Localization
    'get_language',
    'get_ui_strings',
    'Translator',
    'TranslationCache',
    'get_translator',
    'translate_portfolio'
]
