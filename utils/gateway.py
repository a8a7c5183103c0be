"""
Gateway Module - Chat-completions backed translation for the /api/translate proxy
"""

import json
import logging
import re

import requests

logger = logging.getLogger(__name__)

LANGUAGE_NAMES = {
    'fr': 'French',
    'en': 'English',
}

_JSON_ARRAY = re.compile(r'\[[\s\S]*\]')


class GatewayError(Exception):
    """Upstream model gateway refused or failed the request"""

    def __init__(self, message, status_code=500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def language_name(language):
    return LANGUAGE_NAMES.get(language, 'English')


def build_batch_prompt(texts):
    """Numbered-list prompt: one ``[i] text`` line per entry"""
    return '\n'.join(f"[{i}] {text}" for i, text in enumerate(texts))


def build_system_prompt(language, batch):
    name = language_name(language)
    if batch:
        return (
            f"You are a professional translator. Translate each numbered line to {name}. \n"
            "Return ONLY a JSON array of translated strings in the same order, nothing else.\n"
            "Example input:\n"
            "[0] Hello\n"
            "[1] World\n"
            "Example output:\n"
            "[\"Bonjour\", \"Monde\"]\n"
            f"If text is already in {name}, return it as-is. Preserve formatting within each text."
        )
    return (
        f"You are a professional translator. Translate the following text to {name}. "
        "Only return the translated text, nothing else. Preserve any formatting, line breaks, "
        f"and special characters. If the text is already in {name}, return it as-is."
    )


def parse_batch_reply(content, expected):
    """
    Extract the JSON array of translations from a model reply

    Args:
        content (str): Raw reply text
        expected (int): Number of texts that were sent

    Returns:
        list | None: Translations, or None when the reply cannot be used
    """
    match = _JSON_ARRAY.search(content or '')
    if not match:
        logger.error("No JSON array in batch translation reply")
        return None

    try:
        translations = json.loads(match.group(0))
    except ValueError as e:
        logger.error(f"Failed to parse batch translation: {str(e)}")
        return None

    if not isinstance(translations, list) or len(translations) != expected:
        logger.error("Translation count mismatch")
        return None
    return translations


class TranslationGateway:
    """Client for an OpenAI-style chat-completions endpoint"""

    def __init__(self, api_key, url, model, timeout=30, session=None):
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get('AI_GATEWAY_API_KEY'),
            url=config.get('AI_GATEWAY_URL'),
            model=config.get('AI_GATEWAY_MODEL'),
            timeout=config.get('TRANSLATE_TIMEOUT', 30))

    def complete(self, system_prompt, prompt):
        """Send one chat completion and return the reply text"""
        if not self.api_key:
            raise GatewayError('AI_GATEWAY_API_KEY is not configured')

        try:
            response = self.session.post(
                self.url,
                headers={
                    'Authorization': f"Bearer {self.api_key}",
                    'Content-Type': 'application/json',
                },
                json={
                    'model': self.model,
                    'messages': [
                        {'role': 'system', 'content': system_prompt},
                        {'role': 'user', 'content': prompt},
                    ],
                },
                timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"AI gateway request error: {str(e)}")
            raise GatewayError('Translation failed') from e

        if response.status_code == 429:
            logger.error("Rate limit hit")
            raise GatewayError('Rate limit exceeded, please try again later.', 429)
        if response.status_code == 402:
            raise GatewayError('Payment required.', 402)
        if not response.ok:
            logger.error(f"AI gateway error: {response.status_code} {response.text[:500]}")
            raise GatewayError('Translation failed')

        try:
            data = response.json()
            return data['choices'][0]['message']['content'] or ''
        except (ValueError, KeyError, IndexError, TypeError):
            return ''

    def translate_text(self, text, language):
        content = self.complete(build_system_prompt(language, batch=False), text)
        return content or text

    def translate_batch(self, texts, language):
        """Translations aligned with ``texts``, or None when the reply is unusable"""
        logger.info(f"Translating {len(texts)} text(s) to {language_name(language)}")
        content = self.complete(build_system_prompt(language, batch=True), build_batch_prompt(texts))
        return parse_batch_reply(content, len(texts))
