"""Service layer. Each service gets its session and settings at construction."""

from flask import current_app

from .credentials import CredentialStore
from .tokens import TokenService, TokenUser, Claims
from .contacts import ContactService
from .catalog import CatalogService
from .dashboard import DashboardService
from .notifications import NotificationDispatcher, MailTransport, SnsTransport, build_dispatcher


def init_services(app, db, bcrypt, mail):
    """Build the services for this app and register them in app.extensions."""
    notifier = build_dispatcher(app, mail)
    app.extensions['showroom'] = {
        'credentials': CredentialStore(db.session, bcrypt),
        'tokens': TokenService(app.config['JWT_SECRET_KEY'], ttl=app.config['TOKEN_TTL'],
                               algorithm=app.config['JWT_ALGORITHM']),
        'contacts': ContactService(db.session, notifier),
        'catalog': CatalogService(db.session),
        'dashboard': DashboardService(db.session),
        'notifier': notifier,
    }


def get_service(name):
    return current_app.extensions['showroom'][name]


__all__ = [
    'CredentialStore',
    'TokenService',
    'TokenUser',
    'Claims',
    'ContactService',
    'CatalogService',
    'DashboardService',
    'NotificationDispatcher',
    'MailTransport',
    'SnsTransport',
    'build_dispatcher',
    'init_services',
    'get_service',
]
