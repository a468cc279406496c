"""Contact form endpoints."""

from flask import Blueprint, current_app, request
from flask_login import login_required

from showroom.services import get_service
from showroom.utils.decorators import admin_required
from showroom.utils.responses import success, page_args

contact_bp = Blueprint('contact', __name__)


@contact_bp.route('', methods=['POST'])
def submit():
    """Public contact form submission."""
    contact = get_service('contacts').submit(
        request.get_json(silent=True),
        ip_address=request.remote_addr,
        user_agent=request.headers.get('User-Agent')
    )
    return success({
        'id': contact.id,
        'name': contact.name,
        'email': contact.email,
        'subject': contact.subject,
        'status': contact.status,
        'createdAt': contact.to_dict()['createdAt'],
    }, message='Your message has been sent successfully', status=201)


@contact_bp.route('', methods=['GET'])
@login_required
@admin_required
def list_contacts():
    """Paginated inbox, newest first."""
    page, per_page = page_args(current_app.config.get('CONTACTS_PER_PAGE', 10))
    pagination = get_service('contacts').list(
        status=request.args.get('status') or None,
        search=request.args.get('search') or None,
        page=page,
        per_page=per_page
    )
    return success([c.to_dict(include_client=False) for c in pagination.items],
                   pagination=pagination)


@contact_bp.route('/<int:contact_id>', methods=['GET'])
@login_required
@admin_required
def get_contact(contact_id):
    return success(get_service('contacts').get(contact_id).to_dict())


@contact_bp.route('/<int:contact_id>/status', methods=['PUT'])
@login_required
@admin_required
def set_status(contact_id):
    """Move a message to any of new, read, replied, closed."""
    body = request.get_json(silent=True) or {}
    status = body.get('status') if isinstance(body, dict) else None
    contact = get_service('contacts').set_status(contact_id, status)
    current_app.logger.info('Contact %s marked %s', contact.id, contact.status)
    return success(contact.to_dict(), message='Status updated')


@contact_bp.route('/<int:contact_id>', methods=['DELETE'])
@login_required
@admin_required
def delete_contact(contact_id):
    get_service('contacts').delete(contact_id)
    current_app.logger.info('Contact %s deleted', contact_id)
    return success(message='Message deleted')
