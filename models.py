from extensions import db, login_manager
from datetime import datetime
from flask_login import UserMixin
from sqlalchemy import JSON
import uuid


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


def _uuid():
    return str(uuid.uuid4())


class Portfolio(db.Model):
    __tablename__ = 'portfolio'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255), default='')
    bio = db.Column(db.Text, default='')
    image = db.Column(db.String(500))
    email = db.Column(db.String(255), default='')
    phone = db.Column(db.String(50), default='')
    location = db.Column(db.String(255), default='')
    linkedin = db.Column(db.String(500))
    github = db.Column(db.String(500))
    resume_url = db.Column(db.String(500))
    resume_url_fr = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    projects = db.relationship('Project', backref='portfolio', lazy=True, cascade='all, delete-orphan')
    experiences = db.relationship('Experience', backref='portfolio', lazy=True, cascade='all, delete-orphan')
    skills = db.relationship('Skill', backref='portfolio', lazy=True, cascade='all, delete-orphan')
    hobbies = db.relationship('Hobby', backref='portfolio', lazy=True, cascade='all, delete-orphan')
    education = db.relationship('Education', backref='portfolio', lazy=True, cascade='all, delete-orphan')


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    portfolio_id = db.Column(db.String(36), db.ForeignKey('portfolio.id'), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default='')
    tags = db.Column(SafeJSON, default=list)
    link = db.Column(db.String(500))
    github = db.Column(db.String(500))
    image = db.Column(db.String(500))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Experience(db.Model):
    __tablename__ = 'experiences'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    portfolio_id = db.Column(db.String(36), db.ForeignKey('portfolio.id'), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    title = db.Column(db.String(255), nullable=False)  # role
    period = db.Column(db.String(100), default='')  # duration
    description = db.Column(db.Text, default='')
    skills = db.Column(SafeJSON, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Skill(db.Model):
    __tablename__ = 'skills'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    portfolio_id = db.Column(db.String(36), db.ForeignKey('portfolio.id'), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100), default='')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Hobby(db.Model):
    __tablename__ = 'hobbies'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    portfolio_id = db.Column(db.String(36), db.ForeignKey('portfolio.id'), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    category = db.Column(db.String(100), default='')
    icon = db.Column(db.String(100))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Education(db.Model):
    __tablename__ = 'education'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    portfolio_id = db.Column(db.String(36), db.ForeignKey('portfolio.id'), nullable=False)
    institution = db.Column(db.String(255), nullable=False)
    degree = db.Column(db.String(255), nullable=False)
    period = db.Column(db.String(100), default='')
    description = db.Column(db.Text, default='')
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class ContactMessage(db.Model):
    __tablename__ = 'contact_messages'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255), default='')
    message = db.Column(db.Text, nullable=False)
    read = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class Testimonial(db.Model):
    __tablename__ = 'testimonials'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)
    content = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), default='pending')  # pending, approved, rejected
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_testimonial_status_date', 'status', 'created_at'),
    )


class User(UserMixin, db.Model):
    """Auth record; the email is synthesized from the username."""
    __tablename__ = 'users'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    last_sign_in_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    profile = db.relationship('Profile', backref='user', uselist=False, lazy=True, cascade='all, delete-orphan')
    roles = db.relationship('UserRole', backref='user', lazy=True, cascade='all, delete-orphan')
    testimonials = db.relationship('Testimonial', backref='author', lazy=True, cascade='all, delete-orphan')

    @property
    def username(self):
        return self.profile.username if self.profile else None

    @property
    def is_admin(self):
        return any(r.role == 'admin' for r in self.roles)


class Profile(db.Model):
    __tablename__ = 'profiles'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, unique=True)
    username = db.Column(db.String(255), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)


class UserRole(db.Model):
    __tablename__ = 'user_roles'
    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='user')  # admin, user

    __table_args__ = (
        db.UniqueConstraint('user_id', 'role', name='uq_user_role'),
    )


@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, user_id)
