"""
Dashboard Routes - Admin content management
Handles: About/contact editing, section CRUD, resume files, messages, testimonials, users
"""

from flask import current_app, request
from flask_login import current_user
from extensions import db
from models import ContactMessage, Testimonial, User
from utils.accounts import set_admin_role
from utils.data import (
    SECTIONS, get_dashboard_stats, get_or_create_portfolio, load_portfolio, load_section,
    message_to_dict, testimonial_to_dict, user_to_dict
)
from utils.decorators import admin_required
from utils.helpers import success_response, error_response, get_payload, clean_str, parse_list
from utils.storage import allowed_resume, save_resume, remove_resume
from . import dashboard_bp

ABOUT_FIELDS = {'name': 255, 'title': 255, 'bio': None, 'image': 500}
CONTACT_FIELDS = {'email': 255, 'phone': 50, 'location': 255, 'linkedin': 500, 'github': 500}
RESUME_COLUMNS = {'en': 'resume_url', 'fr': 'resume_url_fr'}
TESTIMONIAL_STATUSES = ('pending', 'approved', 'rejected')


@dashboard_bp.route('/')
@admin_required
def index():
    """Dashboard statistics"""
    try:
        stats = get_dashboard_stats()
    except Exception as e:
        current_app.logger.error(f"Error computing dashboard stats: {str(e)}")
        db.session.rollback()
        return error_response('Could not load dashboard.', 500)
    return success_response(stats=stats, portfolio=load_portfolio())


def _update_portfolio(fields, section_name):
    payload = get_payload()
    portfolio = get_or_create_portfolio()

    if 'name' in fields and 'name' in payload and not clean_str(payload.get('name')):
        return error_response('Name is required.', 400)

    for field, limit in fields.items():
        if field in payload:
            value = clean_str(payload.get(field), limit)
            setattr(portfolio, field, value or (None if field in ('image', 'linkedin', 'github') else ''))

    try:
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error saving {section_name}: {str(e)}")
        db.session.rollback()
        return error_response(f'Failed to save {section_name}.', 500)

    current_app.logger.info(f"{section_name} updated by {current_user.username}")
    return success_response(f'{section_name} saved successfully', portfolio=load_portfolio())


@dashboard_bp.route('/about', methods=['PUT', 'POST'])
@admin_required
def about():
    """Edit about section"""
    return _update_portfolio(ABOUT_FIELDS, 'About section')


@dashboard_bp.route('/contact', methods=['PUT', 'POST'])
@admin_required
def contact():
    """Edit contact information"""
    return _update_portfolio(CONTACT_FIELDS, 'Contact information')


def _apply_section_payload(record, entry, payload, partial):
    """Copy payload values onto a section record; return an error message or None"""
    for key in entry['required']:
        if (not partial or key in payload) and not clean_str(payload.get(key)):
            return f"'{key}' is required."

    for key, column in entry['fields'].items():
        if key not in payload:
            if not partial and key in entry['lists']:
                setattr(record, column, [])
            continue
        if key in entry['lists']:
            setattr(record, column, parse_list(payload.get(key)))
        else:
            value = clean_str(payload.get(key), 5000)
            setattr(record, column, value or None if column in ('link', 'github', 'image', 'icon') else value)
    return None


@dashboard_bp.route('/<section>', methods=['GET'])
@admin_required
def list_section(section):
    """List a section's records"""
    if section not in SECTIONS:
        return error_response('Section not found', 404)
    return success_response(items=load_section(section))


@dashboard_bp.route('/<section>', methods=['POST'])
@admin_required
def add_item(section):
    """Add a record to a section"""
    entry = SECTIONS.get(section)
    if entry is None:
        return error_response('Section not found', 404)

    portfolio = get_or_create_portfolio()
    record = entry['model'](portfolio_id=portfolio.id)
    error = _apply_section_payload(record, entry, get_payload(), partial=False)
    if error:
        return error_response(error, 400)

    try:
        db.session.add(record)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error adding to {section}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to save. Please try again.', 500)

    current_app.logger.info(f"Added {section} record {record.id}")
    return success_response('Added successfully', 201, item=entry['to_dict'](record))


@dashboard_bp.route('/<section>/<item_id>', methods=['PUT', 'PATCH'])
@admin_required
def update_item(section, item_id):
    """Update a section record"""
    entry = SECTIONS.get(section)
    if entry is None:
        return error_response('Section not found', 404)

    record = db.session.get(entry['model'], item_id)
    if record is None:
        return error_response('Item not found', 404)

    error = _apply_section_payload(record, entry, get_payload(), partial=request.method == 'PATCH')
    if error:
        return error_response(error, 400)

    try:
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error updating {section} record {item_id}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to save. Please try again.', 500)

    return success_response('Updated successfully', item=entry['to_dict'](record))


@dashboard_bp.route('/<section>/<item_id>', methods=['DELETE'])
@admin_required
def delete_item(section, item_id):
    """Delete a section record"""
    entry = SECTIONS.get(section)
    if entry is None:
        return error_response('Section not found', 404)

    record = db.session.get(entry['model'], item_id)
    if record is None:
        return error_response('Item not found', 404)

    try:
        db.session.delete(record)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error deleting {section} record {item_id}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to delete. Please try again.', 500)

    current_app.logger.info(f"Deleted {section} record {item_id}")
    return success_response('Deleted successfully')


def _resume_language():
    language = (request.args.get('language') or request.form.get('language') or 'en').lower()
    return language if language in RESUME_COLUMNS else None


@dashboard_bp.route('/resume', methods=['POST'])
@admin_required
def upload_resume():
    """Upload a resume (PDF or image) for one language"""
    language = _resume_language()
    if language is None:
        return error_response('Unsupported resume language', 400)

    file = request.files.get('resume')
    if not file or not file.filename:
        return error_response('No file selected', 400)
    if not allowed_resume(file.filename):
        return error_response('Please upload a PDF or an image.', 400)

    try:
        url = save_resume(file, language)
    except Exception as e:
        current_app.logger.error(f"Resume upload error: {str(e)}")
        return error_response('Failed to upload resume.', 500)

    # The file is stored; a failed metadata update leaves it orphaned.
    portfolio = get_or_create_portfolio()
    column = RESUME_COLUMNS[language]
    previous = getattr(portfolio, column)
    try:
        setattr(portfolio, column, url)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Resume uploaded to {url} but saving the URL failed: {str(e)}")
        db.session.rollback()
        return error_response('Resume uploaded but could not be saved.', 500)

    if previous and previous != url:
        try:
            remove_resume(previous)
        except OSError as e:
            current_app.logger.warning(f"Could not remove previous resume {previous}: {str(e)}")

    return success_response('Resume uploaded successfully', 201, language=language, resume_url=url)


@dashboard_bp.route('/resume', methods=['DELETE'])
@admin_required
def delete_resume():
    """Remove the resume for one language"""
    language = _resume_language()
    if language is None:
        return error_response('Unsupported resume language', 400)

    portfolio = get_or_create_portfolio()
    column = RESUME_COLUMNS[language]
    url = getattr(portfolio, column)
    if not url:
        return error_response('No resume to remove', 404)

    try:
        remove_resume(url)
    except OSError as e:
        current_app.logger.error(f"Resume file removal error: {str(e)}")
        return error_response('Failed to remove resume.', 500)

    try:
        setattr(portfolio, column, None)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Resume file removed but clearing the URL failed: {str(e)}")
        db.session.rollback()
        return error_response('Failed to remove resume.', 500)

    return success_response('Resume removed', language=language)


@dashboard_bp.route('/messages')
@admin_required
def messages():
    """Contact messages, newest first"""
    records = ContactMessage.query.order_by(ContactMessage.created_at.desc()).all()
    return success_response(
        messages=[message_to_dict(m) for m in records],
        unread=sum(1 for m in records if not m.read))


@dashboard_bp.route('/messages/<message_id>', methods=['PATCH'])
@admin_required
def mark_message(message_id):
    """Mark a message read or unread"""
    message = db.session.get(ContactMessage, message_id)
    if message is None:
        return error_response('Message not found', 404)

    payload = get_payload()
    read = payload.get('read', True)
    if isinstance(read, str):
        read = read.lower() in ('1', 'true', 'on', 'yes')

    try:
        message.read = bool(read)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error updating message {message_id}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to update message.', 500)

    return success_response(message=message_to_dict(message))


@dashboard_bp.route('/messages/<message_id>', methods=['DELETE'])
@admin_required
def delete_message(message_id):
    """Delete a contact message"""
    message = db.session.get(ContactMessage, message_id)
    if message is None:
        return error_response('Message not found', 404)

    try:
        db.session.delete(message)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error deleting message {message_id}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to delete message.', 500)

    return success_response('Message deleted')


@dashboard_bp.route('/testimonials')
@admin_required
def testimonials():
    """All testimonials, optionally filtered by status"""
    query = Testimonial.query
    status = request.args.get('status')
    if status:
        if status not in TESTIMONIAL_STATUSES:
            return error_response('Unknown status', 400)
        query = query.filter_by(status=status)
    records = query.order_by(Testimonial.created_at.desc()).all()
    return success_response(testimonials=[testimonial_to_dict(t) for t in records])


def _moderate(testimonial_id, status):
    testimonial = db.session.get(Testimonial, testimonial_id)
    if testimonial is None:
        return error_response('Testimonial not found', 404)

    try:
        testimonial.status = status
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error moderating testimonial {testimonial_id}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to update testimonial.', 500)

    current_app.logger.info(f"Testimonial {testimonial_id} {status} by {current_user.username}")
    return success_response(f'Testimonial {status}', testimonial=testimonial_to_dict(testimonial))


@dashboard_bp.route('/testimonials/<testimonial_id>/approve', methods=['POST'])
@admin_required
def approve_testimonial(testimonial_id):
    return _moderate(testimonial_id, 'approved')


@dashboard_bp.route('/testimonials/<testimonial_id>/reject', methods=['POST'])
@admin_required
def reject_testimonial(testimonial_id):
    return _moderate(testimonial_id, 'rejected')


@dashboard_bp.route('/testimonials/<testimonial_id>', methods=['DELETE'])
@admin_required
def delete_testimonial(testimonial_id):
    testimonial = db.session.get(Testimonial, testimonial_id)
    if testimonial is None:
        return error_response('Testimonial not found', 404)

    try:
        db.session.delete(testimonial)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error deleting testimonial {testimonial_id}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to delete testimonial.', 500)

    return success_response('Testimonial deleted')


@dashboard_bp.route('/users')
@admin_required
def users():
    """Registered users with their roles"""
    records = User.query.order_by(User.created_at).all()
    return success_response(users=[user_to_dict(u) for u in records])


@dashboard_bp.route('/users/<user_id>/role', methods=['PUT', 'POST'])
@admin_required
def set_role(user_id):
    """Grant or revoke the admin role"""
    user = db.session.get(User, user_id)
    if user is None:
        return error_response('User not found', 404)

    role = clean_str(get_payload().get('role')).lower()
    if role not in ('admin', 'user'):
        return error_response('Role must be admin or user', 400)
    if user.id == current_user.id and role != 'admin':
        return error_response('You cannot remove your own admin role.', 400)

    try:
        set_admin_role(user, role == 'admin')
    except Exception as e:
        current_app.logger.error(f"Error changing role for {user_id}: {str(e)}")
        db.session.rollback()
        return error_response('Failed to update role.', 500)

    current_app.logger.info(f"User {user.username} role set to {role} by {current_user.username}")
    return success_response('Role updated', user=user_to_dict(user))
