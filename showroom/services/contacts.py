"""Contact intake and triage."""

from flask import current_app
from sqlalchemy import or_

from showroom.errors import DeliveryFailed, InvalidStatus, NotFound
from showroom.forms import ContactForm, validate
from showroom.models import Contact, CONTACT_STATUSES, USER_AGENT_LENGTH


def like_pattern(text):
    """Case-insensitive substring pattern with LIKE wildcards escaped."""
    escaped = text.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'


class ContactService:
    """Creates contact records and manages their status."""

    def __init__(self, session, notifier=None):
        self.session = session
        self.notifier = notifier

    def submit(self, fields, ip_address, user_agent=None):
        """Validate and store a submission, then notify the site owner.

        ip_address and user_agent come from the request; anything the client
        put in the body under those names is ignored.
        """
        data = validate(ContactForm, fields)
        contact = Contact(
            name=data['name'],
            email=data['email'],
            phone=data['phone'],
            subject=data['subject'],
            message=data['message'],
            status='new',
            ip_address=ip_address or 'unknown',
            user_agent=user_agent[:USER_AGENT_LENGTH] if user_agent else None
        )
        self.session.add(contact)
        self.session.commit()
        current_app.logger.info('Contact %s received from %s', contact.id, contact.ip_address)

        if self.notifier is not None:
            try:
                self.notifier.notify(contact)
            except DeliveryFailed as exc:
                current_app.logger.warning('Notification for contact %s failed: %s', contact.id, exc)
        return contact

    def list(self, status=None, search=None, page=1, per_page=10):
        query = self.session.query(Contact)

        if status:
            query = query.filter(Contact.status == status)

        if search:
            pattern = like_pattern(search)
            query = query.filter(
                or_(
                    Contact.name.ilike(pattern, escape='\\'),
                    Contact.email.ilike(pattern, escape='\\'),
                    Contact.subject.ilike(pattern, escape='\\')
                )
            )

        return query.order_by(Contact.created_at.desc(), Contact.id.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

    def get(self, contact_id):
        contact = self.session.get(Contact, contact_id)
        if contact is None:
            raise NotFound('Message not found')
        return contact

    def set_status(self, contact_id, status):
        if status not in CONTACT_STATUSES:
            raise InvalidStatus(errors=[{
                'field': 'status',
                'rule': 'enum',
                'message': f'Status must be one of: {", ".join(CONTACT_STATUSES)}'
            }])
        contact = self.get(contact_id)
        contact.status = status
        self.session.commit()
        return contact

    def delete(self, contact_id):
        contact = self.get(contact_id)
        self.session.delete(contact)
        self.session.commit()
