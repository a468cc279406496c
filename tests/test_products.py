import pytest

from showroom.errors import DuplicateName, NotFound, ValidationFailed
from showroom.models import Product, ProductTerm, tokenize
from showroom.services import get_service


def product(name, category='window', description='Durable profile for every season.', **extra):
    return dict({'name': name, 'description': description, 'category': category}, **extra)


@pytest.fixture
def catalog(ctx):
    return get_service('catalog')


@pytest.fixture
def showroom_catalog(client, admin_headers):
    """Three active windows, one inactive window, an active door."""
    items = [
        product('PVC Window', description='Energy saving PVC window with double glazing.'),
        product('Aluminium Window', description='Slim aluminium frame for wide openings.'),
        product('Wooden Window', description='Oak window frame with natural finish.'),
        product('Retired Window', description='Old single glazed window, no longer sold.',
                isActive=False),
        product('Steel Door', category='door', description='Insulated steel entrance door.'),
    ]
    for item in items:
        assert client.post('/api/products', json=item, headers=admin_headers).status_code == 201
    return items


def test_tokenize():
    assert tokenize('PVC window, pvc DOOR') == ['pvc', 'window', 'door']
    assert tokenize('Kapı ve pencere') == ['kapı', 've', 'pencere']
    assert tokenize(None) == []


def test_create_product(client, admin_headers, product_payload):
    response = client.post('/api/products', json=product_payload, headers=admin_headers)
    assert response.status_code == 201
    data = response.get_json()['data']
    assert data['name'] == 'PVC Tilt and Turn Window'
    assert data['features'] == ['Double glazing', 'Thermal break']
    assert data['isActive'] is True
    assert data['price'] == 4200
    assert data['specifications'] == {'material': 'PVC', 'warranty': '10 years'}

    fetched = client.get(f'/api/products/{data["id"]}').get_json()['data']
    assert fetched == data


def test_mutations_require_admin(client, moderator_headers, product_payload):
    assert client.post('/api/products', json=product_payload).status_code == 401
    assert client.post('/api/products', json=product_payload,
                       headers=moderator_headers).status_code == 403
    assert client.put('/api/products/1', json=product_payload).status_code == 401
    assert client.delete('/api/products/1', headers=moderator_headers).status_code == 403


def test_duplicate_name_is_rejected(client, admin_headers, product_payload):
    assert client.post('/api/products', json=product_payload, headers=admin_headers).status_code == 201
    response = client.post('/api/products', json=product_payload, headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json()['message'] == 'This product name is already in use'


def test_invalid_product_lists_every_error(client, admin_headers):
    response = client.post('/api/products', json={'name': 'ab', 'category': 'roof', 'price': -5},
                           headers=admin_headers)
    assert response.status_code == 400
    errors = response.get_json()['errors']
    assert [e['field'] for e in errors] == ['name', 'description', 'category', 'price']


def test_public_listing_filters(client, showroom_catalog):
    response = client.get('/api/products?category=window&active=true')
    body = response.get_json()
    assert response.status_code == 200
    assert sorted(p['name'] for p in body['data']) == ['Aluminium Window', 'PVC Window',
                                                        'Wooden Window']
    assert body['pagination']['total'] == 3

    everything = client.get('/api/products').get_json()
    assert everything['pagination']['total'] == 4
    assert everything['data'][0]['name'] == 'Steel Door'

    with_inactive = client.get('/api/products?active=false&category=window').get_json()
    assert with_inactive['pagination']['total'] == 4


def test_listing_pagination(client, showroom_catalog):
    body = client.get('/api/products?limit=2&page=2').get_json()
    assert body['pagination'] == {'current': 2, 'pages': 2, 'total': 4}
    assert len(body['data']) == 2

    beyond = client.get('/api/products?limit=2&page=9').get_json()
    assert beyond['data'] == []
    assert beyond['pagination']['total'] == 4

    clamped = client.get('/api/products?limit=0&page=-3').get_json()
    assert clamped['pagination']['current'] == 1
    assert len(clamped['data']) == 1


def test_search_matches_whole_words(client, showroom_catalog):
    found = client.get('/api/products?search=glazing').get_json()
    assert [p['name'] for p in found['data']] == ['PVC Window']

    found = client.get('/api/products?search=OAK%20steel').get_json()
    assert sorted(p['name'] for p in found['data']) == ['Steel Door', 'Wooden Window']

    assert client.get('/api/products?search=glaz').get_json()['data'] == []

    found = client.get('/api/products?search=glazed&active=false').get_json()
    assert [p['name'] for p in found['data']] == ['Retired Window']


def test_categories_lists_active_distinct(client, showroom_catalog, admin_headers):
    assert client.get('/api/products/categories').get_json()['data'] == ['door', 'window']

    client.post('/api/products', json=product('Hidden Shutter', category='shutter', isActive=False),
                headers=admin_headers)
    assert client.get('/api/products/categories').get_json()['data'] == ['door', 'window']


def test_update_product(client, admin_headers, product_payload):
    product_id = client.post('/api/products', json=product_payload,
                             headers=admin_headers).get_json()['data']['id']

    changes = product('Renamed Window', description='Triple glazed passive house window.',
                      isActive=False)
    response = client.put(f'/api/products/{product_id}', json=changes, headers=admin_headers)
    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['name'] == 'Renamed Window'
    assert data['isActive'] is False
    assert data['price'] == 4200
    assert data['features'] == ['Double glazing', 'Thermal break']

    found = client.get('/api/products?search=passive&active=false').get_json()
    assert [p['id'] for p in found['data']] == [product_id]
    assert client.get('/api/products?search=tilt&active=false').get_json()['data'] == []

    response = client.put(f'/api/products/{product_id}', json={'name': 'x'}, headers=admin_headers)
    assert response.status_code == 400

    response = client.put('/api/products/999', json=changes, headers=admin_headers)
    assert response.status_code == 404
    assert response.get_json()['message'] == 'Product not found'


def test_update_to_existing_name(client, admin_headers):
    client.post('/api/products', json=product('First Window'), headers=admin_headers)
    second = client.post('/api/products', json=product('Second Window'),
                         headers=admin_headers).get_json()['data']['id']
    response = client.put(f'/api/products/{second}', json=product('First Window'),
                          headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json()['message'] == 'This product name is already in use'


def test_delete_product(client, admin_headers, product_payload):
    product_id = client.post('/api/products', json=product_payload,
                             headers=admin_headers).get_json()['data']['id']
    assert client.delete(f'/api/products/{product_id}', headers=admin_headers).status_code == 200
    assert client.get(f'/api/products/{product_id}').status_code == 404
    assert client.get('/api/products?search=pvc').get_json()['data'] == []


def test_service_keeps_search_terms_in_step(catalog, product_payload):
    created = catalog.create(product_payload)
    terms = {t.term for t in ProductTerm.query.filter_by(product_id=created.id)}
    assert {'pvc', 'tilt', 'glazing', 'chamber'} <= terms

    catalog.delete(created.id)
    assert ProductTerm.query.count() == 0
    assert Product.query.count() == 0


def test_service_errors(catalog, product_payload):
    with pytest.raises(NotFound):
        catalog.get(1)
    with pytest.raises(ValidationFailed):
        catalog.create({})
    catalog.create(product_payload)
    with pytest.raises(DuplicateName):
        catalog.create(product_payload)
    assert catalog.list().total == 1


def test_non_finite_price_is_rejected(client, admin_headers):
    body = ('{"name": "Infinite Window", "description": "A window with no price ceiling.",'
            ' "category": "window", "price": Infinity}')
    response = client.post('/api/products', data=body, content_type='application/json',
                           headers=admin_headers)
    assert response.status_code == 400
    assert response.get_json()['errors'] == [
        {'field': 'price', 'rule': 'type', 'message': 'Must be a number.'}
    ]
    assert client.get('/api/products').get_json()['pagination']['total'] == 0


def test_page_far_past_the_end_is_empty(client, showroom_catalog):
    response = client.get('/api/products?page=99999999999999999999')
    assert response.status_code == 200
    body = response.get_json()
    assert body['data'] == []
    assert body['pagination']['total'] == 4


def test_service_update_to_existing_name(catalog, product_payload):
    catalog.create(product_payload)
    other = catalog.create(dict(product_payload, name='Aluminium Sliding Window'))
    with pytest.raises(DuplicateName):
        catalog.update(other.id, product_payload)
    assert catalog.get(other.id).name == 'Aluminium Sliding Window'
