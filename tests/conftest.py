"""
Pytest configuration and fixtures for the portfolio site.

- Application built from TestingConfig (in-memory SQLite, temp upload folder)
- Fake translation client recording every batch it receives
- Anonymous, regular-user and admin test clients
"""

import os

os.environ['FLASK_ENV'] = 'testing'

import pytest

from app import create_app
from utils.accounts import create_account
from utils.security import reset_rate_limits
from utils.translation import TranslationCache, Translator


class FakeTranslationClient:
    """Stands in for the remote translation endpoint.

    By default "translates" by prefixing the language code; ``reply``
    forces a fixed response and ``fail`` raises like a network error.
    """

    def __init__(self, reply=None, fail=False):
        self.reply = reply
        self.fail = fail
        self.calls = []

    def translate_batch(self, texts, language):
        self.calls.append((list(texts), language))
        if self.fail:
            raise ConnectionError('translation endpoint unreachable')
        if self.reply is not None:
            return self.reply
        return [f"[{language}] {text}" for text in texts]


@pytest.fixture
def fake_client():
    return FakeTranslationClient()


@pytest.fixture
def translator(fake_client):
    return Translator(client=fake_client, cache=TranslationCache())


@pytest.fixture
def app(tmp_path, translator):
    reset_rate_limits()
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    app.extensions['translator'] = translator
    yield app
    reset_rate_limits()


@pytest.fixture
def client(app):
    return app.test_client()


def _login(app, username, password, role='user'):
    with app.app_context():
        create_account(username, password, role=role)
    test_client = app.test_client()
    response = test_client.post('/auth/login', json={'username': username, 'password': password})
    assert response.status_code == 200
    return test_client


@pytest.fixture
def user_client(app):
    return _login(app, 'visitor', 'secret123')


@pytest.fixture
def admin_client(app):
    return _login(app, 'owner', 'admin-pass', role='admin')
