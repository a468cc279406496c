"""Signed, time-bound access tokens."""

from collections import namedtuple
from datetime import datetime, timedelta, timezone

from flask_login import UserMixin
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from showroom.errors import TokenExpired, TokenInvalid, TokenMissing

Claims = namedtuple('Claims', ['account_id', 'username', 'role', 'expires_at'])


class TokenUser(UserMixin):
    """Flask-Login identity built from verified claims, without a database hit."""

    def __init__(self, claims):
        self.claims = claims
        self.id = claims.account_id
        self.username = claims.username
        self.role = claims.role

    def is_admin(self):
        return self.role == 'admin'


class TokenService:
    """Issues and verifies HS256 JWTs. Verification never touches the database."""

    def __init__(self, secret, ttl=24 * 60 * 60, algorithm='HS256'):
        if not secret:
            raise ValueError('A signing secret is required')
        self.secret = secret
        self.ttl = timedelta(seconds=ttl)
        self.algorithm = algorithm

    def issue(self, account_id, username, role):
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(account_id),
            'username': username,
            'role': role,
            'iat': now,
            'exp': now + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token):
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except JWTError as exc:
            raise TokenInvalid() from exc

        try:
            return Claims(
                account_id=int(payload['sub']),
                username=payload['username'],
                role=payload['role'],
                expires_at=datetime.fromtimestamp(payload['exp'], timezone.utc),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise TokenInvalid() from exc

    @staticmethod
    def parse_header(value):
        """Extract the token from an ``Authorization: Bearer <token>`` header."""
        if not value:
            raise TokenMissing()
        scheme, _, token = value.strip().partition(' ')
        if scheme.lower() != 'bearer' or not token.strip():
            raise TokenMissing()
        return token.strip()
