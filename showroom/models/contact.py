"""Contact message model."""

from showroom.extensions import db
from showroom.utils.timezone_utils import utcnow, isoformat

CONTACT_STATUSES = ('new', 'read', 'replied', 'closed')
USER_AGENT_LENGTH = 512


class Contact(db.Model):
    """Contact form messages."""
    __tablename__ = 'contacts'
    __table_args__ = (
        db.Index('ix_contacts_email_created_at', 'email', 'created_at'),
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(254), nullable=False)
    phone = db.Column(db.String(20))
    subject = db.Column(db.String(200), nullable=False)
    message = db.Column(db.String(1000), nullable=False)
    status = db.Column(db.String(20), nullable=False, default='new', index=True)  # new, read, replied, closed
    ip_address = db.Column(db.String(45), nullable=False)
    user_agent = db.Column(db.String(USER_AGENT_LENGTH))
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def to_dict(self, include_client=True):
        """Serialize for the API. Listings leave out the client fingerprint."""
        data = {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'phone': self.phone,
            'subject': self.subject,
            'message': self.message,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
        if include_client:
            data['ipAddress'] = self.ip_address
            data['userAgent'] = self.user_agent
        return data

    def to_summary(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
        }

    def __repr__(self):
        return f'<Contact {self.subject}>'
