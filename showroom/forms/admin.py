"""Admin account forms."""

from wtforms import Form
from wtforms.validators import DataRequired, Email, Length, AnyOf

from showroom.models import ADMIN_ROLES
from .base import TextField, Omittable, strip, lower, none_if_empty


class LoginForm(Form):
    """Login form. Username may also be the account email."""
    username = TextField('Username', validators=[
        DataRequired(message='Username is required')
    ], filters=[strip])
    password = TextField('Password', validators=[
        DataRequired(message='Password is required')
    ])


class RegistrationForm(Form):
    """New admin account."""
    username = TextField('Username', validators=[
        DataRequired(message='Username is required'),
        Length(min=3, max=50, message='Username must be between %(min)d and %(max)d characters')
    ], filters=[strip])
    email = TextField('Email', validators=[
        DataRequired(message='Email is required'),
        Email(message='Please enter a valid email address')
    ], filters=[strip, lower])
    password = TextField('Password', validators=[
        DataRequired(message='Password is required'),
        Length(min=6, message='Password must be at least %(min)d characters')
    ])
    role = TextField('Role', validators=[
        Omittable(),
        AnyOf(ADMIN_ROLES, message='Select a valid role: %(values)s')
    ], filters=[strip, none_if_empty])


class ProfileForm(Form):
    email = TextField('Email', validators=[
        Omittable(),
        Email(message='Please enter a valid email address')
    ], filters=[strip, lower, none_if_empty])


class PasswordForm(Form):
    currentPassword = TextField('Current Password', validators=[
        DataRequired(message='Current password is required')
    ])
    newPassword = TextField('New Password', validators=[
        DataRequired(message='New password is required'),
        Length(min=6, message='Password must be at least %(min)d characters')
    ])
