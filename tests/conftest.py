import pytest

from showroom import create_app
from showroom.extensions import db
from showroom.services import get_service


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def ctx(app):
    """App context for calling services directly. Not for use with the client."""
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_admin(app):
    """Create an account in its own app context and return its id and auth headers."""
    def _make(username='yonetici', email=None, password='secret123', role='admin', is_active=True):
        with app.app_context():
            admin = get_service('credentials').create_account(
                username, email or f'{username}@showroom.com.tr', password, role
            )
            if not is_active:
                admin.is_active = False
                db.session.commit()
            token = get_service('tokens').issue(admin.id, admin.username, admin.role)
            return {
                'id': admin.id,
                'username': admin.username,
                'email': admin.email,
                'role': admin.role,
                'headers': {'Authorization': f'Bearer {token}'},
            }
    return _make


@pytest.fixture
def admin_headers(make_admin):
    return make_admin()['headers']


@pytest.fixture
def moderator_headers(make_admin):
    return make_admin('moderator1', role='moderator')['headers']


@pytest.fixture
def contact_payload():
    return {
        'name': 'Ali Veli',
        'email': 'ALI@X.COM',
        'phone': '5551234567',
        'subject': 'Teklif istiyorum',
        'message': 'Fiyat bilgisi almak istiyorum bu ürün için',
    }


@pytest.fixture
def product_payload():
    return {
        'name': 'PVC Tilt and Turn Window',
        'description': 'Five-chamber PVC profile with double glazing.',
        'category': 'window',
        'features': ['Double glazing', ' Thermal break '],
        'price': 4200,
        'images': [{'url': '/images/pvc.jpg', 'alt': 'PVC window'}],
        'specifications': {'material': 'PVC', 'warranty': '10 years'},
    }
