import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import wraps
from typing import Optional

from flask import after_this_request, g
from werkzeug.http import http_date

from ajax_api.exceptions import RequestTypeNotAllowed
from ajax_api.helpers.request_detector import request_is

logger = logging.getLogger('ajax_api')

NO_CACHE_HEADERS = {
    'Cache-Control': 'no-store, no-cache, must-revalidate, post-check=0, pre-check=0, max-age=0',
    'Pragma': 'no-cache',
    'Expires': 'Mon, 26 Jul 1997 05:00:00 GMT',
}


@dataclass
class AjaxState:
    """Per-request settings applied by the AJAX gate."""
    request_type: str
    debug: bool = True
    auto_render: bool = True
    layout: str = 'default'
    cache_disabled: bool = False
    status_code: Optional[int] = None


def get_ajax_state() -> Optional[AjaxState]:
    """Return the gate state of the current request, if a gate ran."""
    return g.get('ajax_state')


def disable_cache():
    """Mark the response of the current request as non-cacheable."""
    @after_this_request
    def add_no_cache_headers(response):
        for header, value in NO_CACHE_HEADERS.items():
            response.headers[header] = value
        response.headers['Last-Modified'] = http_date(datetime.now(timezone.utc))
        return response


def start_ajax(request_type='ajax', layout='ajax') -> bool:
    """Gate the current request on `request_type` and switch it to raw output.

    Rendering and verbose errors are turned off before the check, so the
    BadRequest raised on a mismatch is answered as an envelope too.
    """
    state = AjaxState(request_type=request_type, debug=False, auto_render=False, layout=layout)
    g.ajax_state = state

    if not request_is(request_type):
        logger.warning(f"Rejected request: only {request_type} calls are allowed")
        raise RequestTypeNotAllowed(request_type)

    disable_cache()
    state.cache_disabled = True
    return True


def ajax_only(request_type='ajax', layout='ajax'):
    """Decorator running the AJAX gate before the view."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            start_ajax(request_type, layout)
            return f(*args, **kwargs)
        return decorated_function
    return decorator
