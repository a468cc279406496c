"""Product and search term models."""

import re

from showroom.extensions import db
from showroom.utils.timezone_utils import utcnow, isoformat

PRODUCT_CATEGORIES = ('window', 'door', 'facade', 'shutter', 'other')
SPECIFICATION_KEYS = ('material', 'dimensions', 'weight', 'warranty')

_WORD = re.compile(r'\w+', re.UNICODE)


def tokenize(text):
    """Split free text into lower-cased word terms, in first-seen order."""
    seen = []
    for word in _WORD.findall((text or '').lower()):
        if word not in seen:
            seen.append(word)
    return seen


class Product(db.Model):
    """Catalog entry."""
    __tablename__ = 'products'
    __table_args__ = (
        db.Index('ix_products_category_is_active', 'category', 'is_active'),
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(20), nullable=False)
    features = db.Column(db.JSON, nullable=False, default=list)
    price = db.Column(db.Float)
    images = db.Column(db.JSON, nullable=False, default=list)  # [{url, alt}]
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    specifications = db.Column(db.JSON, nullable=False, default=dict)
    created_at = db.Column(db.DateTime, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    terms = db.relationship('ProductTerm', backref='product', lazy='select',
                            cascade='all, delete-orphan')

    def apply(self, data):
        """Copy validated form data onto the model and rebuild the search terms."""
        fields = {
            'name': 'name',
            'description': 'description',
            'category': 'category',
            'features': 'features',
            'price': 'price',
            'images': 'images',
            'isActive': 'is_active',
            'specifications': 'specifications',
        }
        for key, attr in fields.items():
            if key in data:
                setattr(self, attr, data[key])
        self.refresh_search_terms()

    def refresh_search_terms(self):
        words = tokenize(f'{self.name or ""} {self.description or ""}')
        self.terms = [ProductTerm(term=word[:100]) for word in words]

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'category': self.category,
            'features': list(self.features or []),
            'price': self.price,
            'images': list(self.images or []),
            'isActive': self.is_active,
            'specifications': dict(self.specifications or {}),
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f'<Product {self.name}>'


class ProductTerm(db.Model):
    """Inverted index row: one word of a product's name or description."""
    __tablename__ = 'product_terms'

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id', ondelete='CASCADE'),
                           nullable=False, index=True)
    term = db.Column(db.String(100), nullable=False, index=True)

    def __repr__(self):
        return f'<ProductTerm {self.term}>'
