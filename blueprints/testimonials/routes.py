"""
Testimonials Routes - Public list and user submissions
"""

from flask import current_app
from flask_login import current_user
from extensions import db
from models import Testimonial
from utils.data import testimonial_to_dict
from utils.decorators import login_required
from utils.helpers import success_response, error_response, get_payload, clean_str
from utils.i18n import get_language
from utils.notifications import send_admin_notification, excerpt
from utils.translation import get_translator
from . import testimonials_bp

MAX_TESTIMONIAL_LENGTH = 500


@testimonials_bp.route('')
def approved():
    """Approved testimonials, newest first"""
    language = get_language()
    try:
        testimonials = Testimonial.query.filter_by(status='approved') \
            .order_by(Testimonial.created_at.desc()).all()
        items = [testimonial_to_dict(t) for t in testimonials]
    except Exception as e:
        current_app.logger.error(f"Error fetching testimonials: {str(e)}")
        db.session.rollback()
        return error_response('Could not load testimonials.', 500)

    items = get_translator().translate_items(items, ['content'], language)
    return success_response(language=language, testimonials=items)


@testimonials_bp.route('/mine')
@login_required
def mine():
    """Current user's testimonials in any status"""
    testimonials = Testimonial.query.filter_by(user_id=current_user.id) \
        .order_by(Testimonial.created_at.desc()).all()
    return success_response(testimonials=[testimonial_to_dict(t) for t in testimonials])


@testimonials_bp.route('', methods=['POST'])
@login_required
def submit():
    """Submit a testimonial for moderation"""
    content = clean_str(get_payload().get('content'))
    if not content:
        return error_response('Testimonial cannot be empty.', 400)
    if len(content) > MAX_TESTIMONIAL_LENGTH:
        return error_response(f'Testimonial must be at most {MAX_TESTIMONIAL_LENGTH} characters.', 400)

    try:
        testimonial = Testimonial(user_id=current_user.id, content=content, status='pending')
        db.session.add(testimonial)
        db.session.commit()
    except Exception as e:
        current_app.logger.error(f"Error submitting testimonial: {str(e)}")
        db.session.rollback()
        return error_response('Failed to submit testimonial', 500)

    current_app.logger.info(f"Testimonial {testimonial.id} submitted by {current_user.username}")
    send_admin_notification(
        'New Testimonial Pending',
        f"👤 From: {current_user.username}\n💬 {excerpt(content)}")

    return success_response('Your testimonial is pending approval.', 201,
                            testimonial=testimonial_to_dict(testimonial))
