"""
Portfolio backend entry point

create_app() wires configuration, extensions, blueprints and JSON error
handling; the routes themselves live in the blueprints package.
"""

import logging
import os
from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db, login_manager

from blueprints.auth import auth_bp
from blueprints.dashboard import dashboard_bp
from blueprints.portfolio import portfolio_bp
from blueprints.testimonials import testimonials_bp
from blueprints.translate import translate_bp


def create_app(config_name=None):
    """
    Build a configured application

    Args:
        config_name (str): 'development', 'production' or 'testing';
            FLASK_ENV decides when omitted

    Returns:
        Flask: The application
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    configure_logging(app)

    initialize_extensions(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_hooks(app)

    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio backend is running'}, 200

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger('utils').setLevel(level)


def initialize_extensions(app):
    """Bind db and login manager, create tables and the bootstrap admin"""
    db.init_app(app)
    login_manager.init_app(app)

    with app.app_context():
        try:
            from sqlalchemy import text
            import models  # noqa: F401  registers the tables
            db.create_all()
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database ready")
        except Exception as e:
            app.logger.error(f"✗ Database setup failed: {str(e)}")
            return

        try:
            from utils.accounts import ensure_admin_account
            ensure_admin_account()
        except Exception as e:
            db.session.rollback()
            app.logger.error(f"✗ Admin bootstrap failed: {str(e)}")


def register_blueprints(app):
    for blueprint in (auth_bp, portfolio_bp, dashboard_bp, testimonials_bp, translate_bp):
        app.register_blueprint(blueprint)


def register_error_handlers(app):
    """Every error leaves as a JSON notification body"""

    def _error(message, status):
        return jsonify({'success': False, 'message': message}), status

    @app.errorhandler(400)
    def bad_request(e):
        return _error('Bad request.', 400)

    @app.errorhandler(401)
    def unauthorized(e):
        return _error('Please log in to access this page.', 401)

    @app.errorhandler(403)
    def forbidden(e):
        return _error('Forbidden.', 403)

    @app.errorhandler(404)
    def not_found(e):
        return _error('Not found.', 404)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return _error('Method not allowed.', 405)

    @app.errorhandler(413)
    def file_too_large(e):
        return _error('File is too large. Maximum size is 16MB.', 413)

    @app.errorhandler(429)
    def too_many_requests(e):
        return _error('Too many requests.', 429)

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        db.session.rollback()
        return _error('Internal server error.', 500)

    @app.errorhandler(Exception)
    def unhandled_exception(e):
        if isinstance(e, HTTPException):
            return _error(e.description, e.code)
        app.logger.exception(f"Unhandled error on {request.path}: {str(e)}")
        db.session.rollback()
        return _error('Internal server error.', 500)


def register_hooks(app):

    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        if not app.debug:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


# gunicorn app:app
app = create_app()

if __name__ == '__main__':
    env = os.environ.get('FLASK_ENV', 'development')
    app = create_app(env)
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
