"""Product catalog."""

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from showroom.errors import DuplicateName, InternalError, NotFound
from showroom.forms import ProductForm, validate
from showroom.models import Product, ProductTerm, tokenize


def _is_name_conflict(exc):
    detail = str(getattr(exc, 'orig', exc)).lower()
    if 'unique' not in detail and 'duplicate' not in detail:
        return False
    return 'products.name' in detail or 'products_name' in detail or '(name)' in detail


class CatalogService:
    """CRUD and public search over products."""

    def __init__(self, session):
        self.session = session

    def _commit(self, product):
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if _is_name_conflict(exc):
                raise DuplicateName() from exc
            current_app.logger.error('Product write failed: %s', exc)
            raise InternalError('Product could not be saved') from exc
        return product

    def list(self, category=None, active_only=True, search=None, page=1, per_page=12):
        """Filter by category and active flag; ``search`` matches whole words
        of name and description through the term index."""
        query = self.session.query(Product)

        if category:
            query = query.filter(Product.category == category)
        if active_only:
            query = query.filter(Product.is_active.is_(True))
        if search is not None and search.strip():
            terms = tokenize(search)
            matching = select(ProductTerm.product_id).where(ProductTerm.term.in_(terms))
            query = query.filter(Product.id.in_(matching))

        return query.order_by(Product.created_at.desc(), Product.id.desc()).paginate(
            page=page, per_page=per_page, error_out=False
        )

    def categories(self):
        rows = self.session.query(Product.category).filter(
            Product.is_active.is_(True)
        ).distinct().all()
        return sorted(row[0] for row in rows)

    def get(self, product_id):
        product = self.session.get(Product, product_id)
        if product is None:
            raise NotFound('Product not found')
        return product

    def create(self, fields):
        data = validate(ProductForm, fields)
        product = Product()
        self.session.add(product)
        with self.session.no_autoflush:
            product.apply(data)
        self._commit(product)
        current_app.logger.info('Product %s created: %s', product.id, product.name)
        return product

    def update(self, product_id, fields):
        """Re-validate the whole document, then write the keys the client sent."""
        data = validate(ProductForm, fields)
        product = self.get(product_id)
        # loading the old terms must not flush a conflicting name outside _commit
        with self.session.no_autoflush:
            product.apply({key: value for key, value in data.items() if key in fields})
        self._commit(product)
        current_app.logger.info('Product %s updated', product.id)
        return product

    def delete(self, product_id):
        product = self.get(product_id)
        self.session.delete(product)
        self.session.commit()
        current_app.logger.info('Product %s deleted', product_id)
