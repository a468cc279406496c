"""Contact form rules."""

from wtforms import Form
from wtforms.validators import DataRequired, Email, Length

from .base import TextField, Omittable, SingleLine, strip, lower, none_if_empty


class ContactForm(Form):
    """Public contact submission."""
    name = TextField('Name', validators=[
        DataRequired(message='Name is required'),
        Length(min=2, max=100, message='Name must be between %(min)d and %(max)d characters')
    ], filters=[strip])
    email = TextField('Email', validators=[
        DataRequired(message='Email is required'),
        Length(max=254, message='Email must be at most %(max)d characters'),
        Email(message='Please enter a valid email address')
    ], filters=[strip, lower])
    phone = TextField('Phone', validators=[
        Omittable(),
        Length(max=20, message='Phone number cannot exceed %(max)d characters')
    ], filters=[strip, none_if_empty])
    subject = TextField('Subject', validators=[
        DataRequired(message='Subject is required'),
        Length(min=5, max=200, message='Subject must be between %(min)d and %(max)d characters'),
        SingleLine(message='Subject must be a single line')
    ], filters=[strip])
    message = TextField('Message', validators=[
        DataRequired(message='Message is required'),
        Length(min=10, max=1000, message='Message must be between %(min)d and %(max)d characters')
    ], filters=[strip])
