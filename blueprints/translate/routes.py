"""
Translate Routes - /api/translate proxy
Accepts {text | texts[], targetLanguage}; returns {translatedText} or {translations[]}
"""

from flask import current_app, jsonify, request
from utils.gateway import GatewayError, TranslationGateway
from utils.security import check_rate_limit
from . import translate_bp

CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'authorization, x-client-info, apikey, content-type',
}


def _json(body, status=200):
    response = jsonify(body)
    response.status_code = status
    response.headers.update(CORS_HEADERS)
    return response


def get_gateway():
    gateway = current_app.extensions.get('translation_gateway')
    if gateway is None:
        gateway = TranslationGateway.from_config(current_app.config)
        current_app.extensions['translation_gateway'] = gateway
    return gateway


@translate_bp.route('/translate', methods=['POST', 'OPTIONS'])
def translate():
    """Translate one text or a batch of texts through the model gateway"""
    if request.method == 'OPTIONS':
        response = current_app.make_response('')
        response.headers.update(CORS_HEADERS)
        return response

    if not check_rate_limit('translate'):
        return _json({'error': 'Rate limit exceeded, please try again later.'}, 429)

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return _json({'error': 'Request body must be a JSON object'}, 400)

    text = body.get('text')
    texts = body.get('texts')
    target_language = body.get('targetLanguage')

    is_batch = isinstance(texts, list) and len(texts) > 0
    texts_to_translate = texts if is_batch else ([text] if text else [])

    if not texts_to_translate or not target_language:
        return _json({'error': 'Missing text/texts or targetLanguage'}, 400)

    gateway = get_gateway()
    try:
        if is_batch:
            translations = gateway.translate_batch(texts_to_translate, target_language)
            # Unusable model reply: echo the originals back
            return _json({'translations': translations if translations is not None else texts_to_translate})
        return _json({'translatedText': gateway.translate_text(texts_to_translate[0], target_language)})
    except GatewayError as e:
        current_app.logger.error(f"Translation error: {e.message}")
        return _json({'error': e.message}, e.status_code)
