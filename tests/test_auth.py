"""Tests for username sign-up, login and the bootstrap admin."""

import pytest

from models import User
from utils.accounts import AccountError, create_account, ensure_admin_account, find_account
from utils.security import synthetic_email, validate_credentials


class TestCredentials:
    @pytest.mark.parametrize('username,password,fragment', [
        ('ab', 'secret123', 'at least 3'),
        ('bad name', 'secret123', 'letters, numbers'),
        ('émile', 'secret123', 'letters, numbers'),
        ('alice', '12345', 'at least 6'),
    ])
    def test_rejected(self, app, username, password, fragment):
        with app.app_context():
            assert fragment in validate_credentials(username, password)

    @pytest.mark.parametrize('username', ['abc', 'jean.dupont', 'a_b-c', 'User42'])
    def test_accepted(self, app, username):
        with app.app_context():
            assert validate_credentials(username, 'secret') is None

    def test_synthetic_email(self, app):
        with app.app_context():
            assert synthetic_email('  Alice ') == 'alice@portfolio.local'


class TestAccounts:
    def test_create_account_adds_profile_and_role(self, app):
        with app.app_context():
            user = create_account('alice', 'secret123')

            assert user.email == 'alice@portfolio.local'
            assert user.username == 'alice'
            assert [r.role for r in user.roles] == ['user']
            assert not user.is_admin

    def test_duplicate_username_case_insensitive(self, app):
        with app.app_context():
            create_account('alice', 'secret123')
            with pytest.raises(AccountError):
                create_account('Alice', 'other-secret')

    def test_find_by_username_or_email(self, app):
        with app.app_context():
            user = create_account('alice', 'secret123')
            assert find_account('alice').id == user.id
            assert find_account('ALICE@portfolio.local').id == user.id
            assert find_account('bob') is None
            assert find_account('') is None


class TestSignup:
    def test_signup_logs_in(self, client):
        response = client.post('/auth/signup', json={'username': 'newbie', 'password': 'secret123'})

        assert response.status_code == 201
        body = response.get_json()
        assert body['user']['username'] == 'newbie'
        assert body['user']['email'] == 'newbie@portfolio.local'
        assert body['user']['roles'] == ['user']

        session = client.get('/auth/session').get_json()
        assert session['authenticated'] is True
        assert session['user']['username'] == 'newbie'

    def test_signup_validation(self, client):
        response = client.post('/auth/signup', json={'username': 'ab', 'password': 'secret123'})
        assert response.status_code == 400
        assert response.get_json()['success'] is False

    def test_duplicate_signup(self, client):
        client.post('/auth/signup', json={'username': 'newbie', 'password': 'secret123'})
        response = client.post('/auth/signup', json={'username': 'NEWBIE', 'password': 'secret123'})

        assert response.status_code == 409

    @pytest.mark.parametrize('password', [1234567, None, ['secret123'], {'value': 'secret123'}])
    def test_signup_non_string_password(self, client, password):
        response = client.post('/auth/signup', json={'username': 'newbie', 'password': password})

        assert response.status_code == 400
        assert response.get_json()['success'] is False

    def test_signup_accepts_form_data(self, client):
        response = client.post('/auth/signup', data={'username': 'formuser', 'password': 'secret123'})
        assert response.status_code == 201

    def test_signup_rate_limited(self, app, client):
        app.config['RATE_LIMIT_MAX_REQUESTS'] = 2
        for name in ('first', 'second'):
            client.post('/auth/signup', json={'username': name, 'password': 'secret123'})

        response = client.post('/auth/signup', json={'username': 'third', 'password': 'secret123'})
        assert response.status_code == 429


class TestLogin:
    def test_login_and_logout(self, app, client):
        with app.app_context():
            create_account('alice', 'secret123')

        response = client.post('/auth/login', json={'username': 'alice', 'password': 'secret123'})
        assert response.status_code == 200
        assert response.get_json()['user']['username'] == 'alice'

        with app.app_context():
            assert find_account('alice').last_sign_in_at is not None

        assert client.post('/auth/logout').status_code == 200
        assert client.get('/auth/session').get_json()['authenticated'] is False

    def test_login_with_email(self, app, client):
        with app.app_context():
            create_account('alice', 'secret123')

        response = client.post('/auth/login', json={'email': 'alice@portfolio.local', 'password': 'secret123'})
        assert response.status_code == 200

    @pytest.mark.parametrize('payload', [
        {'username': 'alice', 'password': 'wrong-pass'},
        {'username': 'nobody', 'password': 'secret123'},
        {'password': 'secret123'},
    ])
    def test_invalid_credentials(self, app, client, payload):
        with app.app_context():
            create_account('alice', 'secret123')

        response = client.post('/auth/login', json=payload)

        assert response.status_code == 401
        assert client.get('/auth/session').get_json()['authenticated'] is False

    def test_non_string_password_is_invalid(self, app, client):
        with app.app_context():
            create_account('alice', '123456')

        response = client.post('/auth/login', json={'username': 'alice', 'password': 123456})

        assert response.status_code == 401

    def test_logout_requires_login(self, client):
        assert client.post('/auth/logout').status_code == 401


class TestBootstrapAdmin:
    def test_not_configured(self, app):
        with app.app_context():
            assert ensure_admin_account() is None
            assert User.query.count() == 0

    def test_creates_admin(self, app):
        app.config['ADMIN_USERNAME'] = 'owner'
        app.config['ADMIN_PASSWORD'] = 'owner-pass'

        with app.app_context():
            user = ensure_admin_account()
            assert user.is_admin
            assert sorted(r.role for r in user.roles) == ['admin', 'user']

            # Idempotent
            assert ensure_admin_account().id == user.id
            assert User.query.count() == 1

    def test_promotes_existing_account(self, app):
        app.config['ADMIN_USERNAME'] = 'owner'
        app.config['ADMIN_PASSWORD'] = 'owner-pass'

        with app.app_context():
            create_account('owner', 'whatever1')
            assert ensure_admin_account().is_admin

    def test_admin_can_log_in(self, app, client):
        app.config['ADMIN_USERNAME'] = 'owner'
        app.config['ADMIN_PASSWORD'] = 'owner-pass'
        with app.app_context():
            ensure_admin_account()

        response = client.post('/auth/login', json={'username': 'owner', 'password': 'owner-pass'})

        assert response.status_code == 200
        assert response.get_json()['user']['is_admin'] is True
