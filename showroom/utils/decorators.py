"""Role-based access decorators for the JSON API."""

from functools import wraps

from flask_login import current_user

from showroom.errors import Forbidden
from showroom.extensions import login_manager
from showroom.services import get_service


def admin_required(f):
    """Decorator to require a valid token carrying the admin role."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        if not current_user.is_admin():
            raise Forbidden()
        return f(*args, **kwargs)
    return decorated_function


def bootstrap_or_admin_required(f):
    """Open while no account exists, so the first admin can register itself."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not get_service('credentials').has_accounts():
            return f(*args, **kwargs)
        return admin_required(f)(*args, **kwargs)
    return decorated_function
