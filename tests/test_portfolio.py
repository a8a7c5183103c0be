"""Tests for the public portfolio API."""

from unittest.mock import patch

import pytest

from extensions import db
from models import ContactMessage, Experience, Project, Skill
from utils.data import get_or_create_portfolio
from utils.i18n import LANGUAGE_COOKIE, UI_STRINGS


@pytest.fixture
def seeded(app):
    with app.app_context():
        portfolio = get_or_create_portfolio()
        portfolio.location = 'Lyon, France'
        db.session.add_all([
            Project(portfolio_id=portfolio.id, title='Weather App', description='Forecasts', tags=['Flask']),
            Experience(portfolio_id=portfolio.id, company='Acme', title='Developer',
                       period='January 2020 - Present', description='Forecasts'),
            Skill(portfolio_id=portfolio.id, name='Python', category='Languages'),
        ])
        db.session.commit()
    return app


class TestPortfolio:
    def test_default_portfolio_created(self, client, fake_client):
        response = client.get('/api/portfolio')

        assert response.status_code == 200
        body = response.get_json()
        assert body['language'] == 'en'
        assert body['portfolio']['about_me']['name'] == 'Your Name'
        assert body['portfolio']['projects'] == []
        assert fake_client.calls == []

    def test_english_is_untranslated(self, seeded, client, fake_client):
        portfolio = client.get('/api/portfolio').get_json()['portfolio']

        assert portfolio['projects'][0]['title'] == 'Weather App'
        assert portfolio['projects'][0]['technologies'] == ['Flask']
        assert portfolio['experiences'][0]['role'] == 'Developer'
        assert fake_client.calls == []

    def test_french_in_one_batch(self, seeded, client, fake_client):
        portfolio = client.get('/api/portfolio?lang=fr').get_json()['portfolio']

        assert len(fake_client.calls) == 1
        sent, language = fake_client.calls[0]
        assert language == 'fr'
        assert sent.count('Forecasts') == 1
        assert 'January 2020 - Present' not in sent
        assert 'Full Stack Developer' not in sent
        assert 'Languages' not in sent
        assert 'Lyon, France' in sent

        assert portfolio['about_me']['title'] == 'Développeur Full Stack'
        assert portfolio['about_me']['name'] == 'Your Name'
        assert portfolio['contact']['location'] == '[fr] Lyon, France'
        assert portfolio['contact']['email'] == 'you@example.com'
        assert portfolio['projects'][0]['title'] == '[fr] Weather App'
        assert portfolio['projects'][0]['technologies'] == ['Flask']
        assert portfolio['experiences'][0]['duration'] == 'janvier 2020 - Présent'
        assert portfolio['experiences'][0]['company'] == 'Acme'
        assert portfolio['skills'][0] == {
            'id': portfolio['skills'][0]['id'], 'name': 'Python', 'category': 'Langages'}

    def test_french_served_from_cache(self, seeded, client, fake_client):
        client.get('/api/portfolio?lang=fr')
        client.get('/api/portfolio?lang=fr')

        assert len(fake_client.calls) == 1

    def test_translation_failure_returns_originals(self, seeded, client, fake_client):
        fake_client.fail = True

        response = client.get('/api/portfolio?lang=fr')

        assert response.status_code == 200
        assert response.get_json()['portfolio']['projects'][0]['title'] == 'Weather App'

    def test_unsupported_language_falls_back(self, client):
        assert client.get('/api/portfolio?lang=de').get_json()['language'] == 'en'


class TestSections:
    def test_section(self, seeded, client):
        items = client.get('/api/portfolio/skills').get_json()['items']
        assert [s['name'] for s in items] == ['Python']

    def test_section_translated(self, seeded, client):
        items = client.get('/api/portfolio/projects?lang=fr').get_json()['items']
        assert items[0]['description'] == '[fr] Forecasts'

    def test_unknown_section(self, client):
        assert client.get('/api/portfolio/secrets').status_code == 404


class TestLanguage:
    def test_set_language_cookie_and_session(self, client):
        response = client.post('/api/language', json={'language': 'FR'})

        assert response.status_code == 200
        assert response.get_json()['language'] == 'fr'
        assert any(LANGUAGE_COOKIE in c for c in response.headers.getlist('Set-Cookie'))
        assert client.get('/api/i18n').get_json()['language'] == 'fr'

    def test_unsupported_language(self, client):
        assert client.post('/api/language', json={'language': 'de'}).status_code == 400

    def test_cookie_selects_language(self, client):
        client.set_cookie(LANGUAGE_COOKIE, 'fr')
        assert client.get('/api/i18n').get_json()['language'] == 'fr'

    def test_query_argument_wins(self, client):
        client.post('/api/language', json={'language': 'fr'})
        assert client.get('/api/i18n?lang=en').get_json()['language'] == 'en'

    def test_ui_strings(self, client):
        body = client.get('/api/i18n?lang=fr').get_json()
        assert body['strings'] == UI_STRINGS['fr']


def test_ui_string_tables_have_same_keys():
    for group, strings in UI_STRINGS['en'].items():
        assert set(strings) == set(UI_STRINGS['fr'][group]), group


class TestResume:
    def _set(self, app, en=None, fr=None):
        with app.app_context():
            portfolio = get_or_create_portfolio()
            portfolio.resume_url = en
            portfolio.resume_url_fr = fr
            db.session.commit()

    def test_no_resume(self, client):
        body = client.get('/api/resume').get_json()
        assert body['resume_url'] is None
        assert body['is_pdf'] is False

    def test_french_falls_back_to_english(self, app, client):
        self._set(app, en='/uploads/resumes/cv.pdf')

        body = client.get('/api/resume?lang=fr').get_json()

        assert body['resume_url'] == '/uploads/resumes/cv.pdf'
        assert body['is_pdf'] is True

    def test_french_resume(self, app, client):
        self._set(app, en='/uploads/resumes/cv.pdf', fr='/uploads/resumes/cv-fr.png')

        body = client.get('/api/resume?lang=fr').get_json()

        assert body['resume_url'] == '/uploads/resumes/cv-fr.png'
        assert body['is_pdf'] is False
        assert client.get('/api/resume').get_json()['resume_url'] == '/uploads/resumes/cv.pdf'


class TestContact:
    PAYLOAD = {'name': 'Jane', 'email': 'jane@example.com', 'subject': 'Hi', 'message': 'Hello there'}

    def test_message_saved_and_owner_notified(self, app, client):
        with patch('blueprints.portfolio.routes.send_admin_notification') as notify:
            response = client.post('/api/contact', json=self.PAYLOAD)

        assert response.status_code == 201
        notify.assert_called_once()
        assert 'Jane' in notify.call_args[0][1]
        with app.app_context():
            message = ContactMessage.query.one()
            assert message.email == 'jane@example.com'
            assert message.read is False

    @pytest.mark.parametrize('missing', ['name', 'email', 'message'])
    def test_required_fields(self, client, missing):
        payload = dict(self.PAYLOAD, **{missing: '  '})
        assert client.post('/api/contact', json=payload).status_code == 400

    def test_honeypot_silently_dropped(self, app, client):
        response = client.post('/api/contact', json=dict(self.PAYLOAD, website='http://spam'))

        assert response.status_code == 200
        with app.app_context():
            assert ContactMessage.query.count() == 0

    def test_rate_limited(self, app, client):
        app.config['RATE_LIMIT_MAX_REQUESTS'] = 2
        for _ in range(2):
            assert client.post('/api/contact', json=self.PAYLOAD).status_code == 201

        assert client.post('/api/contact', json=self.PAYLOAD).status_code == 429

    def test_rate_limit_is_per_client_ip(self, app, client):
        app.config['RATE_LIMIT_MAX_REQUESTS'] = 1
        client.post('/api/contact', json=self.PAYLOAD, headers={'X-Forwarded-For': '10.0.0.1'})

        response = client.post('/api/contact', json=self.PAYLOAD, headers={'X-Forwarded-For': '10.0.0.2, 10.0.0.1'})

        assert response.status_code == 201


def test_health(client):
    assert client.get('/health').get_json()['status'] == 'ok'


def test_unknown_route_is_json_404(client):
    response = client.get('/nope')
    assert response.status_code == 404
    assert response.get_json()['success'] is False
