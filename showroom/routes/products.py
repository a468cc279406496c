"""Product catalog endpoints."""

from flask import Blueprint, current_app, request
from flask_login import login_required

from showroom.services import get_service
from showroom.utils.decorators import admin_required
from showroom.utils.responses import success, page_args

products_bp = Blueprint('products', __name__)


@products_bp.route('', methods=['GET'])
def list_products():
    """Public listing. Inactive products are hidden unless ?active=false."""
    page, per_page = page_args(current_app.config.get('ITEMS_PER_PAGE', 12))
    pagination = get_service('catalog').list(
        category=request.args.get('category') or None,
        active_only=request.args.get('active', 'true').lower() != 'false',
        search=request.args.get('search') or None,
        page=page,
        per_page=per_page
    )
    return success([p.to_dict() for p in pagination.items], pagination=pagination)


@products_bp.route('/categories', methods=['GET'])
def categories():
    return success(get_service('catalog').categories())


@products_bp.route('/<int:product_id>', methods=['GET'])
def get_product(product_id):
    return success(get_service('catalog').get(product_id).to_dict())


@products_bp.route('', methods=['POST'])
@login_required
@admin_required
def create_product():
    product = get_service('catalog').create(request.get_json(silent=True))
    return success(product.to_dict(), message='Product created successfully', status=201)


@products_bp.route('/<int:product_id>', methods=['PUT'])
@login_required
@admin_required
def update_product(product_id):
    product = get_service('catalog').update(product_id, request.get_json(silent=True))
    return success(product.to_dict(), message='Product updated successfully')


@products_bp.route('/<int:product_id>', methods=['DELETE'])
@login_required
@admin_required
def delete_product(product_id):
    get_service('catalog').delete(product_id)
    return success(message='Product deleted')
