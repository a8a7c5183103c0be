"""
Translation Module - Cached, batched translation of portfolio content

Lookup order for a (language, text) pair:
    1. manual translation table for known strings
    2. inline regex substitutions for date-only strings (month names, "Present")
    3. process-wide cache
    4. one batched call to the remote translation endpoint

Remote failures fall back to the original text. Nothing is retried.
"""

import logging
import re

import requests
from flask import current_app

logger = logging.getLogger(__name__)

SOURCE_LANGUAGE = 'en'


MANUAL_TRANSLATIONS = {
    'fr': {
        'About': 'À propos',
        'About Me': 'À propos de moi',
        'Projects': 'Projets',
        'Experience': 'Expérience',
        'Skills': 'Compétences',
        'Hobbies': 'Loisirs',
        'Education': 'Formation',
        'Contact': 'Contact',
        'Resume': 'CV',
        'Testimonials': 'Témoignages',
        'Present': 'Présent',
        'Full Stack Developer': 'Développeur Full Stack',
        'Software Developer': 'Développeur logiciel',
        'Web Developer': 'Développeur Web',
        'Frontend': 'Frontend',
        'Backend': 'Backend',
        'Database': 'Base de données',
        'Databases': 'Bases de données',
        'Tools': 'Outils',
        'Languages': 'Langages',
        'Frameworks': 'Frameworks',
        'Sports': 'Sports',
        'Music': 'Musique',
        'Gaming': 'Jeux vidéo',
        'Reading': 'Lecture',
        'Travel': 'Voyages',
        'Cooking': 'Cuisine',
        'Photography': 'Photographie',
        'Computer Science': 'Informatique',
    },
}


def _word(word):
    return re.compile(r"\b" + word + r"\b")


def _abbr(word):
    return re.compile(r"\b" + word + r"\b\.?")


# Whole-word substitutions applied inside a string (dates, durations).
# Full month names come before their abbreviations.
INLINE_SUBSTITUTIONS = {
    'fr': [
        (_word('January'), 'janvier'),
        (_word('February'), 'février'),
        (_word('March'), 'mars'),
        (_word('April'), 'avril'),
        (_word('May'), 'mai'),
        (_word('June'), 'juin'),
        (_word('July'), 'juillet'),
        (_word('August'), 'août'),
        (_word('September'), 'septembre'),
        (_word('October'), 'octobre'),
        (_word('November'), 'novembre'),
        (_word('December'), 'décembre'),
        (_abbr('Jan'), 'janv.'),
        (_abbr('Feb'), 'févr.'),
        (_abbr('Mar'), 'mars'),
        (_abbr('Apr'), 'avr.'),
        (_abbr('Jun'), 'juin'),
        (_abbr('Jul'), 'juil.'),
        (_abbr('Aug'), 'août'),
        (_abbr('Sept?'), 'sept.'),
        (_abbr('Oct'), 'oct.'),
        (_abbr('Nov'), 'nov.'),
        (_abbr('Dec'), 'déc.'),
        (_word('Present'), 'Présent'),
    ],
}

_WORDS = re.compile(r"[^\W\d_]+")


class TranslationCache:
    """Process-wide (language, original) -> translation mapping.

    No eviction, no persistence.
    """

    def __init__(self):
        self._store = {}

    def get(self, language, text):
        return self._store.get(language, {}).get(text)

    def set(self, language, text, translated):
        self._store.setdefault(language, {})[text] = translated

    def clear(self):
        self._store.clear()

    def __contains__(self, key):
        language, text = key
        return text in self._store.get(language, {})

    def __len__(self):
        return sum(len(entries) for entries in self._store.values())


# Shared by every Translator that is not handed its own cache
translation_cache = TranslationCache()


class RemoteTranslationClient:
    """HTTP client for the remote translation endpoint.

    Sends ``{"texts": [...], "targetLanguage": "fr"}`` and expects
    ``{"translations": [...]}`` back.
    """

    def __init__(self, url, api_key=None, timeout=30, session=None):
        self.url = url
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def translate_batch(self, texts, language):
        """
        Translate texts in one request

        Args:
            texts (list): Distinct strings to translate
            language (str): Target language code

        Returns:
            list | None: Translations in request order, None on any failure
        """
        headers = {'Content-Type': 'application/json'}
        if self.api_key:
            headers['Authorization'] = f"Bearer {self.api_key}"

        try:
            response = self.session.post(
                self.url,
                json={'texts': texts, 'targetLanguage': language},
                headers=headers,
                timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Batch translation error: {str(e)}")
            return None

        if not response.ok:
            logger.error(f"Batch translation failed: {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Batch translation returned invalid JSON: {str(e)}")
            return None

        translations = data.get('translations') if isinstance(data, dict) else None
        if not isinstance(translations, list):
            logger.error("Batch translation response has no translations list")
            return None
        return translations


class Translator:
    """Resolve translations through local overrides, the cache, then the remote client."""

    def __init__(self, client=None, cache=None, source_language=SOURCE_LANGUAGE,
                 manual_translations=None, inline_substitutions=None):
        self.client = client
        self.cache = cache if cache is not None else translation_cache
        self.source_language = source_language
        self.manual_translations = MANUAL_TRANSLATIONS if manual_translations is None else manual_translations
        self.inline_substitutions = INLINE_SUBSTITUTIONS if inline_substitutions is None else inline_substitutions

    def resolve_local(self, text, language):
        """Return the manual or inline-substituted translation, or None"""
        manual = self.manual_translations.get(language, {}).get(text)
        if manual is not None:
            return manual

        # Only date-like strings ("Sep. 2019 - Present"): every word must be a
        # substitution token, anything else goes to the remote.
        substitutions = self.inline_substitutions.get(language, [])
        words = _WORDS.findall(text)
        if not words or not all(any(p.fullmatch(w) for p, _ in substitutions) for w in words):
            return None

        result = text
        for pattern, replacement in substitutions:
            result = pattern.sub(replacement, result)
        return result

    def translate(self, text, language):
        return self.translate_batch([text], language)[0]

    def translate_batch(self, texts, language):
        """
        Translate a list of strings with at most one remote call

        Empty and non-string entries are passed through. Duplicates and
        cached strings are not sent to the remote endpoint.

        Args:
            texts (list): Strings to translate
            language (str): Target language code

        Returns:
            list: Translations aligned with ``texts``
        """
        texts = list(texts)
        if not texts:
            return []

        if language == self.source_language:
            for text in texts:
                if _translatable(text):
                    self.cache.set(language, text, text)
            return texts

        pending = []
        seen = set()
        for text in texts:
            if not _translatable(text) or text in seen:
                continue
            seen.add(text)

            local = self.resolve_local(text, language)
            if local is not None:
                self.cache.set(language, text, local)
                continue
            if self.cache.get(language, text):
                continue
            pending.append(text)

        if pending:
            self._fill_from_remote(pending, language)

        return [self._lookup(text, language) for text in texts]

    def translate_items(self, items, fields, language):
        """
        Translate selected string fields across a collection of dicts

        All distinct strings across every item and field go out in a single
        batch; each item is then rebuilt from the cache.

        Args:
            items (list): Dicts to translate (not mutated)
            fields (list): Keys whose string values should be translated
            language (str): Target language code

        Returns:
            list: Shallow copies of ``items`` with translated fields
        """
        items = list(items or [])
        if not items:
            return []
        if language == self.source_language:
            return [dict(item) for item in items]

        texts = collect_texts(items, fields)
        if texts:
            self.translate_batch(texts, language)
        return [self.apply(item, fields, language) for item in items]

    def apply(self, item, fields, language):
        """Copy of ``item`` with fields replaced from local overrides and the cache; never calls out"""
        copy = dict(item)
        if language == self.source_language:
            return copy
        for field in fields:
            value = item.get(field)
            if _translatable(value):
                copy[field] = self._lookup(value, language)
        return copy

    def _fill_from_remote(self, texts, language):
        if self.client is None:
            logger.debug(f"No translation client configured, leaving {len(texts)} text(s) untranslated")
            return

        try:
            translations = self.client.translate_batch(texts, language)
        except Exception as e:
            logger.error(f"Batch translation error: {str(e)}")
            return

        if not isinstance(translations, list) or len(translations) != len(texts):
            logger.error(f"Translation count mismatch for {len(texts)} text(s), returning originals")
            return

        for original, translated in zip(texts, translations):
            if not isinstance(translated, str) or not translated:
                translated = original
            self.cache.set(language, original, translated)

    def _lookup(self, text, language):
        if not _translatable(text):
            return text
        local = self.resolve_local(text, language)
        if local is not None:
            return local
        return self.cache.get(language, text) or text


def _translatable(value):
    return isinstance(value, str) and bool(value.strip())


def collect_texts(items, fields):
    """Distinct translatable values of ``fields`` across ``items``, in first-seen order"""
    texts = []
    seen = set()
    for item in items:
        for field in fields:
            value = item.get(field)
            if _translatable(value) and value not in seen:
                seen.add(value)
                texts.append(value)
    return texts


# Translatable fields per public portfolio section
PORTFOLIO_FIELDS = {
    'projects': ['title', 'description'],
    'experiences': ['role', 'duration', 'description'],
    'skills': ['category'],
    'hobbies': ['name', 'category'],
    'education': ['degree', 'duration', 'description'],
}


ABOUT_FIELDS = ['title', 'bio']
CONTACT_FIELDS = ['location']


def translate_portfolio(data, language, translator=None):
    """
    Return a copy of the portfolio dict translated to ``language``

    The about section, the contact location and every portfolio section
    share a single batch, so a page load costs at most one remote request.
    """
    translator = translator or get_translator()
    groups = {
        'about_me': ([data.get('about_me', {})], ABOUT_FIELDS),
        'contact': ([data.get('contact', {})], CONTACT_FIELDS),
    }
    for section, fields in PORTFOLIO_FIELDS.items():
        groups[section] = (data.get(section, []), fields)

    if language != translator.source_language:
        texts = []
        for items, fields in groups.values():
            texts.extend(collect_texts(items, fields))
        if texts:
            translator.translate_batch(texts, language)

    result = dict(data)
    for key, (items, fields) in groups.items():
        result[key] = [translator.apply(item, fields, language) for item in items]
    for key in ('about_me', 'contact'):
        result[key] = result[key][0]
    return result


def build_translator(app):
    """Build the translator described by the app configuration"""
    client = None
    if app.config.get('TRANSLATE_URL'):
        client = RemoteTranslationClient(
            app.config['TRANSLATE_URL'],
            api_key=app.config.get('TRANSLATE_API_KEY'),
            timeout=app.config.get('TRANSLATE_TIMEOUT', 30))
        app.logger.info(f"✓ Translation endpoint: {app.config['TRANSLATE_URL']}")
    elif app.config.get('AI_GATEWAY_API_KEY'):
        from .gateway import TranslationGateway
        client = TranslationGateway.from_config(app.config)
        app.logger.info("✓ Translation served by the in-process model gateway")
    else:
        app.logger.warning("No translation backend configured; content will not be translated")

    return Translator(client=client, source_language=app.config.get('SOURCE_LANGUAGE', SOURCE_LANGUAGE))


def get_translator():
    """Get the current application's translator, creating it on first use"""
    translator = current_app.extensions.get('translator')
    if translator is None:
        translator = build_translator(current_app)
        current_app.extensions['translator'] = translator
    return translator
