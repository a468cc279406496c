"""Flask application factory."""

import os

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import config
from .errors import ServiceError, TokenMissing, Unauthenticated
from .extensions import db, migrate, login_manager, bcrypt, mail, cors
from .utils.responses import failure


def create_app(config_name=None, **overrides):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    config_class = config[config_name]
    app.config.from_object(config_class)
    app.config.update(overrides)
    if hasattr(config_class, 'check'):
        config_class.check(app)

    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)
    mail.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}})

    # Make sure the models are registered before create_all / migrations
    from . import models  # noqa: F401

    from .services import init_services, get_service, TokenService, TokenUser
    init_services(app, db, bcrypt, mail)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Bearer tokens for Flask-Login
    @login_manager.request_loader
    def load_user_from_request(req):
        try:
            token = TokenService.parse_header(req.headers.get('Authorization'))
            claims = get_service('tokens').verify(token)
        except Unauthenticated as exc:
            g.auth_error = exc
            return None
        return TokenUser(claims)

    @login_manager.unauthorized_handler
    def unauthorized():
        return failure(g.get('auth_error') or TokenMissing())

    # Error handlers
    @app.errorhandler(ServiceError)
    def service_error(error):
        if error.status_code >= 500:
            db.session.rollback()
            app.logger.error('%s on %s %s', error.message, request.method, request.path)
        return failure(error)

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'success': False, 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        app.logger.exception('Unhandled error on %s %s', request.method, request.path)
        return jsonify({'success': False, 'message': 'An unexpected error occurred'}), 500

    return app
