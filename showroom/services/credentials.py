"""Admin account storage and password verification."""

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError

from showroom.errors import BadCredential, DuplicateIdentity, InternalError, NotFound
from showroom.models import Admin
from showroom.utils.timezone_utils import utcnow


class CredentialStore:
    """Owns the admins table and every password hash written to it."""

    def __init__(self, session, bcrypt):
        self.session = session
        self.bcrypt = bcrypt

    def _hash(self, password):
        try:
            return self.bcrypt.generate_password_hash(password).decode('utf-8')
        except (TypeError, ValueError) as exc:
            raise InternalError('Password could not be processed') from exc

    def _commit(self):
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateIdentity() from exc

    def has_accounts(self):
        return self.session.query(Admin.id).first() is not None

    def get(self, account_id):
        admin = self.session.get(Admin, account_id)
        if admin is None:
            raise NotFound('User not found')
        return admin

    def create_account(self, username, email, password, role='admin'):
        """Hash the password and persist a new account."""
        admin = Admin(
            username=username,
            email=email.lower(),
            password_hash=self._hash(password),
            role=role
        )
        self.session.add(admin)
        self._commit()
        return admin

    def verify(self, identifier, password):
        """Return the active account matching username or email and password.

        Unknown account, inactive account and wrong password all raise the
        same BadCredential.
        """
        admin = self.session.query(Admin).filter(
            or_(Admin.username == identifier, Admin.email == identifier.lower()),
            Admin.is_active.is_(True)
        ).first()
        if admin is None or not self.bcrypt.check_password_hash(admin.password_hash, password):
            raise BadCredential()
        return admin

    def record_login(self, admin):
        admin.last_login = utcnow()
        self.session.commit()

    def change_password(self, admin, current_password, new_password):
        if not self.bcrypt.check_password_hash(admin.password_hash, current_password):
            raise BadCredential('Current password is incorrect')
        admin.password_hash = self._hash(new_password)
        self.session.commit()

    def update_email(self, admin, email):
        admin.email = email.lower()
        self._commit()
        return admin
