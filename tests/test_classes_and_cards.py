from bson import ObjectId


def _class_body(**overrides):
    body = {
        'name': 'Street Photography',
        'image': 'street.png',
        'instructor_name': 'Ina',
        'instructor_email': 'ina@example.com',
        'Available_seats': 10,
        'price': 49.5,
    }
    body.update(overrides)
    return body


def test_create_and_list_classes(client, store, auth_headers) -> None:
    response = client.post('/classes', json=_class_body(), headers=auth_headers('ina@example.com'))

    assert response.status_code == 200
    assert ObjectId.is_valid(response.json()['insertedId'])
    classes = client.get('/classes').json()
    assert len(classes) == 1
    assert classes[0]['sell_count'] == 0
    assert classes[0]['Available_seats'] == 10


def test_class_rejects_negative_seats(client, auth_headers) -> None:
    response = client.post('/classes', json=_class_body(Available_seats=-1), headers=auth_headers())

    assert response.status_code == 422


def test_popular_classes_are_ordered_by_sell_count(client, store) -> None:
    for count in (3, 11, 0, 7):
        store.classes.documents.append({'_id': ObjectId(), 'name': f'class {count}', 'sell_count': count})

    counts = [c['sell_count'] for c in client.get('/popular-classes').json()]

    assert counts == [11, 7, 3, 0]


def test_instructor_classes(client, auth_headers) -> None:
    headers = auth_headers('ina@example.com')
    client.post('/classes', json=_class_body(), headers=headers)
    client.post('/classes', json=_class_body(instructor_email='other@example.com'), headers=headers)

    classes = client.get('/classes/instructor/ina@example.com', headers=headers).json()

    assert [c['instructor_email'] for c in classes] == ['ina@example.com']


def test_delete_card_removes_only_that_card(client, auth_headers) -> None:
    headers = auth_headers('student@example.com')
    first = client.post('/cards', json={'user_email': 'student@example.com', 'name': 'A', 'price': 10}, headers=headers)
    client.post('/cards', json={'user_email': 'student@example.com', 'name': 'B', 'price': 12}, headers=headers)
    card_id = first.json()['insertedId']

    deleted = client.delete(f'/cards/{card_id}', headers=headers)
    cards = client.get('/cards/student@example.com', headers=headers).json()

    assert deleted.json()['deletedCount'] == 1
    assert [c['name'] for c in cards] == ['B']
    assert card_id not in [c['_id'] for c in cards]


def test_cards_are_listed_per_user(client, auth_headers) -> None:
    client.post('/cards', json={'user_email': 'student@example.com', 'price': 10}, headers=auth_headers())
    client.post('/cards', json={'user_email': 'other@example.com', 'price': 10}, headers=auth_headers())

    cards = client.get('/cards/student@example.com', headers=auth_headers('student@example.com')).json()

    assert len(cards) == 1


def test_cards_of_another_user_are_forbidden(client, auth_headers) -> None:
    response = client.get('/cards/student@example.com', headers=auth_headers('intruder@example.com'))

    assert response.status_code == 403
    assert response.json() == {'error': True, 'message': 'Forbidden access'}


def test_single_card(client, auth_headers) -> None:
    created = client.post('/cards', json={'user_email': 'student@example.com', 'name': 'A', 'price': 10}, headers=auth_headers())
    card_id = created.json()['insertedId']

    found = client.get(f'/cards/single/{card_id}', headers=auth_headers())
    missing = client.get(f'/cards/single/{ObjectId()}', headers=auth_headers())

    assert found.json()['name'] == 'A'
    assert missing.status_code == 200
    assert missing.json() is None
