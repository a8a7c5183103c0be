"""Tests for owner notifications over Telegram."""

from unittest.mock import MagicMock, patch

import requests

from utils.notifications import excerpt, send_admin_notification


def test_not_configured(app):
    with app.app_context(), patch('utils.notifications.requests.post') as post:
        assert send_admin_notification('Subject', 'Body', background=False) is False
    post.assert_not_called()


def test_sends_html_message(app):
    app.config['ADMIN_TELEGRAM_BOT_TOKEN'] = 'token'
    app.config['ADMIN_TELEGRAM_CHAT_ID'] = '42'

    with app.app_context(), patch('utils.notifications.requests.post') as post:
        post.return_value = MagicMock(status_code=200)
        assert send_admin_notification('New Message', 'Hello', background=False) is True

    url = post.call_args[0][0]
    payload = post.call_args[1]['json']
    assert url == 'https://api.telegram.org/bottoken/sendMessage'
    assert payload['chat_id'] == '42'
    assert payload['parse_mode'] == 'HTML'
    assert '<b>New Message</b>' in payload['text']
    assert payload['text'].endswith('Hello')


def test_delivery_failure_is_not_raised(app):
    app.config['ADMIN_TELEGRAM_BOT_TOKEN'] = 'token'
    app.config['ADMIN_TELEGRAM_CHAT_ID'] = '42'

    with app.app_context(), patch('utils.notifications.requests.post', side_effect=requests.ConnectionError):
        assert send_admin_notification('New Message', 'Hello', background=False) is True


def test_excerpt():
    assert excerpt('short') == 'short'
    assert excerpt('x' * 250) == 'x' * 200 + '...'
