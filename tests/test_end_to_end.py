"""Full request cycle against a real SQLite database through aiosqlite."""

import pytest
from fastapi.testclient import TestClient

from post_api.app import app


@pytest.fixture(scope='module')
def client():
    # one lifespan for the whole module so the engine stays on one event loop
    with TestClient(app) as client:
        yield client


def test_post_lifecycle(client):
    created = client.post('/post', json={'title': 'Title', 'content': 'Content'})
    assert created.status_code == 200
    body = created.json()
    post_id = body['id']
    assert isinstance(post_id, int)
    assert body['title'] == 'Title'
    assert body['content'] == 'Content'
    assert body['timestamp']

    fetched = client.get(f'/post/{post_id}')
    assert fetched.status_code == 200
    assert fetched.json() == body

    updated = client.put(f'/post/{post_id}', json={'title': 'TitleNew', 'content': 'ContentNew'})
    assert updated.status_code == 200
    assert updated.json() == {
        'id': post_id,
        'title': 'TitleNew',
        'content': 'ContentNew',
        'timestamp': body['timestamp'],
    }

    deleted = client.delete(f'/post/{post_id}')
    assert deleted.status_code == 200
    assert deleted.content == b''

    gone = client.get(f'/post/{post_id}')
    assert gone.status_code == 404
    assert gone.json() == {'status': 404, 'message': f'Entity with id={post_id} not found'}


def test_invalid_update_leaves_post_untouched(client):
    post_id = client.post('/post', json={'title': 'Keep', 'content': 'Me'}).json()['id']

    rejected = client.put(f'/post/{post_id}', json={'title': None, 'content': 'Changed'})
    assert rejected.status_code == 403

    assert client.get(f'/post/{post_id}').json()['title'] == 'Keep'


def test_missing_post_operations_answer_404(client):
    for response in (
        client.get('/post/999999'),
        client.put('/post/999999', json={'title': 'T', 'content': 'C'}),
        client.delete('/post/999999'),
    ):
        assert response.status_code == 404
        assert response.json()['message'] == 'Entity with id=999999 not found'
