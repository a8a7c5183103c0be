import os
from datetime import timedelta


def _database_url():
    """DATABASE_URL, or one assembled from the PG* variables; None when neither is set"""
    url = os.environ.get('DATABASE_URL')
    if not url:
        parts = [os.environ.get(name) for name in ('PGUSER', 'PGPASSWORD', 'PGHOST', 'PGPORT', 'PGDATABASE')]
        if all(parts):
            url = "postgresql://{}:{}@{}:{}/{}".format(*parts)

    # SQLAlchemy only accepts the postgresql:// scheme
    if url and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


def _split_env(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    return tuple(part.strip().lower() for part in value.split(',') if part.strip())


class Config:
    """Shared settings, read from the environment"""

    # Flask / session
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    REMEMBER_COOKIE_DURATION = timedelta(days=30)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Database
    SQLALCHEMY_DATABASE_URI = _database_url() or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Resume storage
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', 'static/uploads')
    ALLOWED_RESUME_EXTENSIONS = {'pdf', 'png', 'jpg', 'jpeg', 'webp'}

    JSON_AS_ASCII = False

    # Accounts
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    AUTH_EMAIL_DOMAIN = os.environ.get('AUTH_EMAIL_DOMAIN', 'portfolio.local')
    USERNAME_MIN_LENGTH = 3
    PASSWORD_MIN_LENGTH = 6

    # Languages
    SOURCE_LANGUAGE = 'en'
    SUPPORTED_LANGUAGES = _split_env('SUPPORTED_LANGUAGES', ('en', 'fr'))

    # Remote translation endpoint used by the cache/batcher
    TRANSLATE_URL = os.environ.get('TRANSLATE_URL')
    TRANSLATE_API_KEY = os.environ.get('TRANSLATE_API_KEY')
    TRANSLATE_TIMEOUT = int(os.environ.get('TRANSLATE_TIMEOUT', '30'))

    # Model gateway behind the /api/translate proxy
    AI_GATEWAY_URL = os.environ.get('AI_GATEWAY_URL', 'https://ai.gateway.lovable.dev/v1/chat/completions')
    AI_GATEWAY_API_KEY = os.environ.get('AI_GATEWAY_API_KEY')
    AI_GATEWAY_MODEL = os.environ.get('AI_GATEWAY_MODEL', 'google/gemini-2.5-flash')

    # Per-IP rate limiting (requests per window, seconds)
    RATE_LIMIT_MAX_REQUESTS = int(os.environ.get('RATE_LIMIT_MAX_REQUESTS', '10'))
    RATE_LIMIT_WINDOW = int(os.environ.get('RATE_LIMIT_WINDOW', '60'))

    # Owner notifications
    ADMIN_TELEGRAM_BOT_TOKEN = os.environ.get('ADMIN_TELEGRAM_BOT_TOKEN')
    ADMIN_TELEGRAM_CHAT_ID = os.environ.get('ADMIN_TELEGRAM_CHAT_ID')


class DevelopmentConfig(Config):
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    REMEMBER_COOKIE_SECURE = True


class TestingConfig(Config):
    """In-memory database, no outside services"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # StaticPool rejects pool options
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_USERNAME = None
    ADMIN_PASSWORD = None
    TRANSLATE_URL = None
    AI_GATEWAY_API_KEY = None
    ADMIN_TELEGRAM_BOT_TOKEN = None
    ADMIN_TELEGRAM_CHAT_ID = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """Configuration class for ``name``, or for FLASK_ENV when not given"""
    env = name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
