"""Database models package."""

from .contact import Contact, CONTACT_STATUSES, USER_AGENT_LENGTH
from .product import Product, ProductTerm, PRODUCT_CATEGORIES, SPECIFICATION_KEYS, tokenize
from .admin import Admin, ADMIN_ROLES

__all__ = [
    'Contact',
    'CONTACT_STATUSES',
    'USER_AGENT_LENGTH',
    'Product',
    'ProductTerm',
    'PRODUCT_CATEGORIES',
    'SPECIFICATION_KEYS',
    'tokenize',
    'Admin',
    'ADMIN_ROLES',
]
