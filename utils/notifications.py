"""
Notifications Module - Telegram notifications to the site owner
"""

import threading
import requests
from flask import current_app


def get_admin_notifications_config():
    """Load admin notification settings from configuration"""
    return {
        'telegram': {
            'bot_token': current_app.config.get('ADMIN_TELEGRAM_BOT_TOKEN') or '',
            'chat_id': current_app.config.get('ADMIN_TELEGRAM_CHAT_ID') or ''
        }
    }


def _post_telegram(logger, url, payload):
    try:
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            logger.info("Admin Telegram notification sent")
        else:
            logger.error(f"Telegram API error: {response.status_code}")
    except Exception as e:
        logger.error(f"Admin Telegram send error: {str(e)}")


def send_admin_notification(subject, message_text, background=True):
    """
    Send notification to the site owner via Telegram

    Args:
        subject (str): Notification subject
        message_text (str): Notification message
        background (bool): Post on a daemon thread instead of inline

    Returns:
        bool: True if a notification was dispatched
    """
    config = get_admin_notifications_config()
    tg_token = config['telegram']['bot_token']
    tg_chat = config['telegram']['chat_id']

    if not (tg_token and tg_chat):
        current_app.logger.debug("Admin Telegram credentials not configured")
        return False

    url = f"https://api.telegram.org/bot{tg_token}/sendMessage"
    payload = {
        'chat_id': tg_chat,
        'text': f"🔔 <b>{subject}</b>\n\n{message_text}",
        'parse_mode': 'HTML'
    }
    logger = current_app.logger

    try:
        if background:
            thread = threading.Thread(target=_post_telegram, args=(logger, url, payload))
            thread.daemon = True
            thread.start()
        else:
            _post_telegram(logger, url, payload)
        return True
    except Exception as e:
        current_app.logger.error(f"Admin Telegram Error: {str(e)}")
        return False


def excerpt(text, limit=200):
    return f"{text[:limit]}{'...' if len(text) > limit else ''}"
