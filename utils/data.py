"""
Data Management Module - Loading and saving portfolio records
"""

from flask import current_app
from extensions import db
from models import (
    Portfolio, Project, Experience, Skill, Hobby, Education,
    ContactMessage, Testimonial, User
)


DEFAULT_PORTFOLIO = {
    'name': 'Your Name',
    'title': 'Full Stack Developer',
    'bio': 'Passionate developer who enjoys building useful, well-crafted software.',
    'email': 'you@example.com',
    'phone': '',
    'location': '',
    'linkedin': None,
    'github': None,
}


def _format_date(value):
    return value.strftime('%Y-%m-%d %H:%M:%S') if value else None


def get_portfolio():
    return Portfolio.query.order_by(Portfolio.created_at).first()


def get_or_create_portfolio():
    """Get the portfolio record, creating it with default data on first use"""
    portfolio = get_portfolio()
    if portfolio:
        return portfolio

    portfolio = Portfolio(**DEFAULT_PORTFOLIO)
    db.session.add(portfolio)
    db.session.commit()
    current_app.logger.info(f"Created default portfolio {portfolio.id}")
    return portfolio


def project_to_dict(project):
    return {
        'id': project.id,
        'title': project.title,
        'description': project.description or '',
        'technologies': project.tags or [],
        'link': project.link,
        'github': project.github,
        'image': project.image,
    }


def experience_to_dict(experience):
    return {
        'id': experience.id,
        'company': experience.company,
        'role': experience.title,
        'duration': experience.period or '',
        'description': experience.description or '',
        'skills': experience.skills or [],
    }


def skill_to_dict(skill):
    return {'id': skill.id, 'name': skill.name, 'category': skill.category or ''}


def hobby_to_dict(hobby):
    return {'id': hobby.id, 'name': hobby.name, 'category': hobby.category or '', 'icon': hobby.icon}


def education_to_dict(education):
    return {
        'id': education.id,
        'institution': education.institution,
        'degree': education.degree,
        'duration': education.period or '',
        'description': education.description or '',
    }


def message_to_dict(message):
    return {
        'id': message.id,
        'name': message.name,
        'email': message.email,
        'subject': message.subject or '',
        'message': message.message,
        'read': bool(message.read),
        'created_at': _format_date(message.created_at),
    }


def testimonial_to_dict(testimonial):
    return {
        'id': testimonial.id,
        'content': testimonial.content,
        'status': testimonial.status,
        'created_at': _format_date(testimonial.created_at),
        'username': testimonial.author.username if testimonial.author and testimonial.author.username else 'Anonymous',
    }


def user_to_dict(user):
    return {
        'id': user.id,
        'username': user.username,
        'email': user.email,
        'roles': sorted(r.role for r in user.roles),
        'is_admin': user.is_admin,
        'created_at': _format_date(user.created_at),
    }


# Editable portfolio sections.
# Each entry: model, serializer, {payload key: column}, required payload keys, list payload keys
SECTIONS = {
    'projects': {
        'model': Project,
        'to_dict': project_to_dict,
        'fields': {
            'title': 'title', 'description': 'description', 'technologies': 'tags',
            'link': 'link', 'github': 'github', 'image': 'image',
        },
        'required': ('title', 'description'),
        'lists': ('technologies',),
    },
    'experiences': {
        'model': Experience,
        'to_dict': experience_to_dict,
        'fields': {
            'company': 'company', 'role': 'title', 'duration': 'period',
            'description': 'description', 'skills': 'skills',
        },
        'required': ('company', 'role'),
        'lists': ('skills',),
    },
    'skills': {
        'model': Skill,
        'to_dict': skill_to_dict,
        'fields': {'name': 'name', 'category': 'category'},
        'required': ('name',),
        'lists': (),
    },
    'hobbies': {
        'model': Hobby,
        'to_dict': hobby_to_dict,
        'fields': {'name': 'name', 'category': 'category', 'icon': 'icon'},
        'required': ('name',),
        'lists': (),
    },
    'education': {
        'model': Education,
        'to_dict': education_to_dict,
        'fields': {
            'institution': 'institution', 'degree': 'degree',
            'duration': 'period', 'description': 'description',
        },
        'required': ('institution', 'degree'),
        'lists': (),
    },
}


def load_section(section, portfolio=None):
    """List one section's records as dicts, oldest first"""
    entry = SECTIONS[section]
    portfolio = portfolio or get_or_create_portfolio()
    model = entry['model']
    records = model.query.filter_by(portfolio_id=portfolio.id).order_by(model.created_at).all()
    return [entry['to_dict'](r) for r in records]


def load_portfolio():
    """
    Load the whole public portfolio

    Returns:
        dict: about_me, contact, each section, and resume URLs
    """
    portfolio = get_or_create_portfolio()
    data = {
        'id': portfolio.id,
        'about_me': {
            'name': portfolio.name,
            'title': portfolio.title or '',
            'bio': portfolio.bio or '',
            'image': portfolio.image,
        },
        'contact': {
            'email': portfolio.email or '',
            'phone': portfolio.phone or '',
            'location': portfolio.location or '',
            'linkedin': portfolio.linkedin,
            'github': portfolio.github,
        },
        'resume_url': portfolio.resume_url,
        'resume_url_fr': portfolio.resume_url_fr,
    }
    for section in SECTIONS:
        data[section] = load_section(section, portfolio)
    return data


def get_dashboard_stats():
    """Counts shown on the dashboard landing view"""
    portfolio = get_or_create_portfolio()
    stats = {
        section: entry['model'].query.filter_by(portfolio_id=portfolio.id).count()
        for section, entry in SECTIONS.items()
    }
    stats.update({
        'messages': ContactMessage.query.count(),
        'unread_messages': ContactMessage.query.filter_by(read=False).count(),
        'testimonials': Testimonial.query.count(),
        'pending_testimonials': Testimonial.query.filter_by(status='pending').count(),
        'users': User.query.count(),
    })
    return stats
