"""Routes package - register all blueprints."""

from flask import Flask


def register_blueprints(app: Flask):
    """Register all blueprints with the application."""
    from .contact import contact_bp
    from .products import products_bp
    from .admin import admin_bp
    from .health import health_bp

    app.register_blueprint(contact_bp, url_prefix='/api/contact')
    app.register_blueprint(products_bp, url_prefix='/api/products')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(health_bp, url_prefix='/api')
