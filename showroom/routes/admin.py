"""Admin authentication, profile and dashboard endpoints."""

from flask import Blueprint, current_app, request
from flask_login import login_required, current_user

from showroom.errors import BadCredential
from showroom.forms import LoginForm, RegistrationForm, ProfileForm, PasswordForm, validate
from showroom.services import get_service
from showroom.utils.decorators import bootstrap_or_admin_required
from showroom.utils.responses import success

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/login', methods=['POST'])
def login():
    """Exchange username (or email) and password for an access token."""
    data = validate(LoginForm, request.get_json(silent=True))
    credentials = get_service('credentials')

    try:
        admin = credentials.verify(data['username'], data['password'])
    except BadCredential:
        current_app.logger.warning('Failed login for %r from %s', data['username'], request.remote_addr)
        raise

    token = get_service('tokens').issue(admin.id, admin.username, admin.role)
    credentials.record_login(admin)
    current_app.logger.info('Admin %s logged in', admin.username)

    return success({
        'token': token,
        'user': {
            'id': admin.id,
            'username': admin.username,
            'email': admin.email,
            'role': admin.role,
            'lastLogin': admin.to_dict()['lastLogin'],
        }
    }, message='Login successful')


@admin_bp.route('/dashboard', methods=['GET'])
@login_required
def dashboard():
    """Summary statistics for any signed-in account."""
    return success(get_service('dashboard').summary())


@admin_bp.route('/register', methods=['POST'])
@bootstrap_or_admin_required
def register():
    """Create an admin account. The very first account is always an admin."""
    credentials = get_service('credentials')
    bootstrap = not credentials.has_accounts()
    data = validate(RegistrationForm, request.get_json(silent=True))

    role = 'admin' if bootstrap else (data['role'] or 'moderator')
    admin = credentials.create_account(data['username'], data['email'], data['password'], role)
    current_app.logger.info('Admin account %s created with role %s', admin.username, admin.role)

    return success({
        'id': admin.id,
        'username': admin.username,
        'email': admin.email,
        'role': admin.role,
    }, message='Admin account created successfully', status=201)


@admin_bp.route('/profile', methods=['GET'])
@login_required
def profile():
    admin = get_service('credentials').get(current_user.id)
    return success(admin.to_dict())


@admin_bp.route('/profile', methods=['PUT'])
@login_required
def update_profile():
    """Only the email address can be changed here."""
    data = validate(ProfileForm, request.get_json(silent=True))
    credentials = get_service('credentials')
    admin = credentials.get(current_user.id)
    if data['email']:
        credentials.update_email(admin, data['email'])
    return success(admin.to_dict(), message='Profile updated successfully')


@admin_bp.route('/password', methods=['PUT'])
@login_required
def change_password():
    data = validate(PasswordForm, request.get_json(silent=True))
    credentials = get_service('credentials')
    admin = credentials.get(current_user.id)
    credentials.change_password(admin, data['currentPassword'], data['newPassword'])
    current_app.logger.info('Admin %s changed password', admin.username)
    return success(message='Password updated successfully')
