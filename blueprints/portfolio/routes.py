"""
Portfolio Routes - Public portfolio views
Handles: Portfolio display, sections, resume, contact form, language selection
"""

from flask import current_app, send_from_directory, session
from extensions import db
from models import ContactMessage
from utils.data import SECTIONS, load_portfolio, load_section, get_or_create_portfolio
from utils.helpers import success_response, error_response, get_payload, clean_str
from utils.i18n import LANGUAGE_COOKIE, get_language, get_ui_strings, is_supported
from utils.notifications import send_admin_notification, excerpt
from utils.security import check_rate_limit
from utils.storage import upload_folder
from utils.translation import PORTFOLIO_FIELDS, get_translator, translate_portfolio
from . import portfolio_bp


@portfolio_bp.route('/api/portfolio')
def portfolio():
    """Whole portfolio in the current language"""
    language = get_language()
    try:
        data = load_portfolio()
    except Exception as e:
        current_app.logger.error(f"Error loading portfolio: {str(e)}")
        db.session.rollback()
        return error_response('Could not load portfolio.', 500)

    data = translate_portfolio(data, language)
    return success_response(language=language, portfolio=data)


@portfolio_bp.route('/api/portfolio/<section>')
def portfolio_section(section):
    """One portfolio section in the current language"""
    if section not in SECTIONS:
        return error_response('Section not found', 404)

    language = get_language()
    try:
        items = load_section(section)
    except Exception as e:
        current_app.logger.error(f"Error loading {section}: {str(e)}")
        db.session.rollback()
        return error_response('Could not load section.', 500)

    items = get_translator().translate_items(items, PORTFOLIO_FIELDS[section], language)
    return success_response(language=language, items=items)


@portfolio_bp.route('/api/resume')
def resume():
    """Resume URL for the current language; French falls back to English"""
    language = get_language()
    portfolio = get_or_create_portfolio()

    url = portfolio.resume_url
    if language == 'fr' and portfolio.resume_url_fr:
        url = portfolio.resume_url_fr

    return success_response(
        language=language,
        resume_url=url,
        is_pdf=bool(url and url.lower().endswith('.pdf')))


@portfolio_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Public URL for stored files"""
    return send_from_directory(upload_folder(), filename)


@portfolio_bp.route('/api/contact', methods=['POST'])
def contact():
    """Contact form processing - saves the message and notifies the owner"""
    payload = get_payload()

    # Honeypot spam protection
    if payload.get('website'):
        return success_response('Message sent successfully!')

    if not check_rate_limit('portfolio_contact'):
        return error_response('Too many requests.', 429)

    name = clean_str(payload.get('name'), 255)
    email = clean_str(payload.get('email'), 255)
    subject = clean_str(payload.get('subject'), 255)
    message_content = clean_str(payload.get('message'))

    if not all([name, email, message_content]):
        return error_response('Required fields missing.', 400)

    try:
        new_message = ContactMessage(
            name=name,
            email=email,
            subject=subject,
            message=message_content[:5000],
            read=False
        )
        db.session.add(new_message)
        db.session.commit()
        current_app.logger.info(f"Contact message saved, message_id: {new_message.id}")
    except Exception as e:
        current_app.logger.error(f"Contact form error: {str(e)}")
        db.session.rollback()
        return error_response('Error sending message. Please try again.', 500)

    send_admin_notification(
        'New Portfolio Message',
        f"👤 From: {name}\n📧 Email: {email}\n📝 Subject: {subject or '-'}\n💬 Message:\n{excerpt(message_content)}")

    return success_response('Message sent successfully! I will get back to you soon.', 201, id=new_message.id)


@portfolio_bp.route('/api/i18n')
def ui_strings():
    """Static UI strings for the current language"""
    language = get_language()
    return success_response(language=language, strings=get_ui_strings(language))


@portfolio_bp.route('/api/language', methods=['POST'])
def set_language():
    """Remember the visitor's language in session and cookie"""
    language = clean_str(get_payload().get('language')).lower()
    if not is_supported(language):
        return error_response('Unsupported language', 400)

    session['language'] = language
    response, status = success_response(language=language)
    response.set_cookie(LANGUAGE_COOKIE, language, max_age=365 * 24 * 3600, samesite='Lax')
    return response, status
