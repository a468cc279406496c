"""Seed script to populate the catalog with sample products."""

from showroom import create_app
from showroom.extensions import db
from showroom.models import Admin, Product
from showroom.services import get_service

PRODUCTS = [
    {
        'name': 'PVC Tilt and Turn Window',
        'description': 'Five-chamber PVC profile with double glazing and warm edge spacer.',
        'category': 'window',
        'features': ['Double glazing', 'Tilt and turn fitting', 'Thermal break'],
        'price': 4200,
        'images': [{'url': '/images/products/pvc-window.jpg', 'alt': 'PVC window'}],
        'specifications': {'material': 'PVC', 'dimensions': '120x140 cm', 'warranty': '10 years'},
    },
    {
        'name': 'Aluminium Sliding Window',
        'description': 'Slim aluminium sliding system for wide openings and balconies.',
        'category': 'window',
        'features': ['Slim frame', 'Low threshold'],
        'price': 6800,
        'specifications': {'material': 'Aluminium', 'warranty': '5 years'},
    },
    {
        'name': 'Steel Entrance Door',
        'description': 'Insulated steel entrance door with multi-point locking.',
        'category': 'door',
        'features': ['Multi-point lock', 'Acoustic insulation'],
        'price': 12500,
        'specifications': {'material': 'Steel', 'dimensions': '90x210 cm', 'weight': '65 kg'},
    },
    {
        'name': 'Structural Glass Facade',
        'description': 'Unitised curtain wall with structural silicone glazing for office buildings.',
        'category': 'facade',
        'features': ['Unitised panels', 'Solar control glass'],
        'specifications': {'material': 'Aluminium and glass'},
    },
    {
        'name': 'Motorised Roller Shutter',
        'description': 'Insulated aluminium roller shutter with remote controlled motor.',
        'category': 'shutter',
        'features': ['Remote control', 'Foam filled slats'],
        'price': 3900,
        'specifications': {'material': 'Aluminium', 'warranty': '3 years'},
    },
]


def seed_database():
    """Seed the database with sample data."""
    app = create_app()

    with app.app_context():
        # Create tables
        db.create_all()

        # Check if already seeded
        if Product.query.first():
            print('Database already seeded!')
            return

        print('Seeding database...')

        catalog = get_service('catalog')
        for product_data in PRODUCTS:
            catalog.create(product_data)

        if not Admin.query.first():
            get_service('credentials').create_account('admin', 'admin@showroom.com.tr', 'admin123', 'admin')

        print('Database seeded successfully!')
        print('\nTest Accounts:')
        print('  Admin: admin / admin123')


if __name__ == '__main__':
    seed_database()
