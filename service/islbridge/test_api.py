"""
Test suite for the interpreter HTTP and WebSocket API.
"""

import pytest

from islbridge import database
from islbridge.server import create_app
from islbridge.translator.matcher import DEFAULT_SENTENCES


@pytest.fixture
def videos_dir(tmp_path):
    path = tmp_path / 'videos'
    path.mkdir()
    (path / '00335.mp4').write_bytes(b'\x00\x00\x00\x18ftypmp42')
    return path


@pytest.fixture
def service(tmp_path, videos_dir):
    db_path = str(tmp_path / 'api.db')
    app, socketio = create_app(db_path=db_path, videos_dir=str(videos_dir))
    app.config['TESTING'] = True

    database.add_sign('YOUR', 'https://cdn.example.com/your.mp4', duration_ms=1000, db_path=db_path)
    database.add_sign('NAME', 'https://cdn.example.com/name.mp4', db_path=db_path)
    database.add_sign('WHAT', 'https://cdn.example.com/what.mp4', db_path=db_path)
    return app, socketio


@pytest.fixture
def client(service):
    app, _ = service
    return app.test_client()


# ========== SERVICE ==========

def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'healthy'


def test_status(client):
    data = client.get('/status').get_json()
    assert data['status'] == 'operational'
    assert data['signs']['total_signs'] == 3
    assert data['supported_sentences'] == len(DEFAULT_SENTENCES)


def test_unknown_route_is_json_404(client):
    response = client.get('/nowhere')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Not found'}


def test_serves_local_sign_video(client):
    response = client.get('/videos/00335.mp4')
    assert response.status_code == 200
    assert response.data == b'\x00\x00\x00\x18ftypmp42'
    assert response.mimetype == 'video/mp4'
    response.close()


def test_missing_local_video_is_json_404(client):
    response = client.get('/videos/99999.mp4')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Not found'}


def test_video_path_cannot_escape_directory(client):
    assert client.get('/videos/../api.db').status_code == 404


# ========== SIGNS ==========

def test_list_signs(client):
    signs = client.get('/api/signs').get_json()
    assert [s['word'] for s in signs] == ['NAME', 'WHAT', 'YOUR']
    assert set(signs[0]) == {'word', 'videoUrl', 'durationMs', 'dominantHand'}


def test_get_sign_case_insensitive(client):
    response = client.get('/api/signs/your')
    assert response.status_code == 200
    assert response.get_json() == {
        'word': 'YOUR',
        'videoUrl': 'https://cdn.example.com/your.mp4',
        'durationMs': 1000,
        'dominantHand': 'RIGHT',
    }


def test_get_sign_not_found(client):
    response = client.get('/api/signs/zebra')
    assert response.status_code == 404
    assert response.get_json() == {
        'error': 'Not Found',
        'message': "Sign for word 'zebra' not found.",
    }


def test_supported_sentences(client):
    sentences = client.get('/api/supported-sentences').get_json()
    assert {'gloss': 'YOUR NAME WHAT', 'words': ['YOUR', 'NAME', 'WHAT']} in sentences
    assert len(sentences) == len(DEFAULT_SENTENCES)


# ========== GLOSS / INTERPRET ==========

def test_gloss(client):
    response = client.post('/api/gloss', json={'text': 'I ate 5 apples'})
    assert response.status_code == 200
    assert response.get_json() == {'gloss': 'I FIVE APPLES EAT'}


def test_gloss_debug_includes_stages(client):
    data = client.post('/api/gloss', json={'text': 'What is your name', 'debug': True}).get_json()
    assert data['gloss'] == 'YOUR NAME WHAT'
    assert data['stages']['stopwords'] == ['what', 'your', 'name']
    assert data['stages']['question'] == ['your', 'name', 'what']


def test_gloss_empty_text(client):
    response = client.post('/api/gloss', json={'text': ''})
    assert response.status_code == 200
    assert response.get_json() == {'gloss': ''}


@pytest.mark.parametrize('body', [{}, {'text': 5}, None, ['hi'], 'hi', 7])
def test_gloss_requires_text(client, body):
    response = client.post('/api/gloss', json=body)
    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'text required'}


@pytest.mark.parametrize('body', [['What is your name'], 'What is your name'])
def test_interpret_rejects_non_object_body(client, body):
    response = client.post('/api/interpret', json=body)
    assert response.status_code == 400
    assert response.get_json() == {'success': False, 'error': 'text required'}


def test_interpret(client):
    data = client.post('/api/interpret', json={'text': 'What is your name'}).get_json()
    assert data['matched'] is True
    assert data['words'] == ['YOUR', 'NAME', 'WHAT']
    assert data['videoUrls']['WHAT'] == 'https://cdn.example.com/what.mp4'
    assert data['error'] is None


def test_interpret_unsupported_is_not_an_http_error(client):
    response = client.post('/api/interpret', json={'text': 'The moon is big'})
    assert response.status_code == 200
    data = response.get_json()
    assert data['matched'] is False
    assert data['error']


def test_interpret_requires_text(client):
    assert client.post('/api/interpret', json={}).status_code == 400


# ========== WEBSOCKET ==========

def test_socket_transcript(service):
    app, socketio = service
    ws = socketio.test_client(app)

    ws.emit('transcript', {'text': 'What is your name'})
    received = ws.get_received()

    assert received[-1]['name'] == 'interpretation'
    assert received[-1]['args'][0]['gloss'] == 'YOUR NAME WHAT'
    ws.disconnect()


def test_socket_transcript_without_text(service):
    app, socketio = service
    ws = socketio.test_client(app)

    ws.emit('transcript', {'words': []})
    received = ws.get_received()

    assert received[-1]['name'] == 'interpretation_error'
    assert received[-1]['args'][0] == {'error': 'text required'}
    ws.disconnect()
