"""Admin account model."""

from showroom.extensions import db
from showroom.utils.timezone_utils import utcnow, isoformat

ADMIN_ROLES = ('admin', 'moderator')


class Admin(db.Model):
    """Privileged operator account."""
    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    email = db.Column(db.String(254), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='admin')  # admin, moderator
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    last_login = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def is_admin(self):
        """Check if account holds the admin role."""
        return self.role == 'admin'

    def to_dict(self):
        """Public profile. The password hash never leaves the model."""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'role': self.role,
            'isActive': self.is_active,
            'lastLogin': isoformat(self.last_login),
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Admin {self.username}>'
