"""
Helpers Module - Request payload and JSON response helpers
"""

from flask import request, jsonify


def success_response(message=None, status=200, **data):
    body = {'success': True}
    if message:
        body['message'] = message
    body.update(data)
    return jsonify(body), status


def error_response(message, status=400, **data):
    body = {'success': False, 'message': message}
    body.update(data)
    return jsonify(body), status


def get_payload():
    """Request body as a plain dict, from JSON or form data"""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def clean_str(value, limit=None):
    if value is None:
        return ''
    value = str(value).strip()
    return value[:limit] if limit else value


def parse_list(value, item_limit=50):
    """Accept a list or a comma separated string; drop blanks"""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(',')
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v).strip()[:item_limit] for v in value if str(v).strip()]
