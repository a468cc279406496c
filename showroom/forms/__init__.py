"""Request validation rule tables."""

from .base import validate, collect_errors
from .contact import ContactForm
from .product import ProductForm
from .admin import LoginForm, RegistrationForm, ProfileForm, PasswordForm

__all__ = [
    'validate',
    'collect_errors',
    'ContactForm',
    'ProductForm',
    'LoginForm',
    'RegistrationForm',
    'ProfileForm',
    'PasswordForm',
]
