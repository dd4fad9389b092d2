import logging
from functools import wraps
from flask import current_app, request
from werkzeug.exceptions import HTTPException

from ajax_api.helpers.response_formatter import error_response
from ajax_api.middleware.ajax_gate import get_ajax_state

logger = logging.getLogger("ajax_api")


def _debug_enabled():
    state = get_ajax_state()
    if state is not None:
        return state.debug
    return current_app.debug


def wants_envelope():
    """Whether errors of the current request should be answered as JSON envelopes."""
    state = get_ajax_state()
    if state is not None and not state.auto_render:
        return True
    return (
        request.path.startswith("/api/")
        or request.headers.get("Accept") == "application/json"
    )


def handle_errors(f):
    """Middleware for consistent AJAX error handling."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Error in {f.__name__}: {str(e)}")

            if _debug_enabled():
                return error_response(f"Internal server error: {str(e)}", code=500)
            return error_response("Internal server error", code=500)

    return decorated_function


def register_error_handlers(app):
    """Register global error handlers for the Flask app."""

    @app.errorhandler(HTTPException)
    def http_error(e):
        if not wants_envelope():
            return e

        response = error_response(e.description, code=e.code)
        # 405 answers must still list what is allowed
        for header, value in e.get_headers():
            if header.lower() == "allow":
                response.headers[header] = value
        return response
