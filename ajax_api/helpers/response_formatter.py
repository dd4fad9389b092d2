import json

from flask import current_app, g, has_request_context

ENVELOPE_MIMETYPE = 'application/json'


def format_envelope(data=None, message=None, code=200):
    """Serialize the `{msg, code, data}` envelope, keys in that order."""
    envelope = {
        'msg': message,
        'code': code,
        'data': {} if data is None else data,
    }
    return json.dumps(envelope, separators=(',', ':'))


def success_response(data=None, message=None, code=200):
    """Build the JSON response for a finished AJAX call."""
    body = format_envelope(data, message, code)

    # Let the active AJAX gate know which status went out
    if has_request_context():
        state = g.get('ajax_state')
        if state is not None:
            state.status_code = code

    return current_app.response_class(body, status=code, mimetype=ENVELOPE_MIMETYPE)


def error_response(message, data=None, code=400):
    """Build the JSON response for an aborted AJAX call."""
    return success_response(data, message, code)
