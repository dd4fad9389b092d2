"""Detect which kinds a Flask request declares (ajax, json, post, ...)."""

import logging
from typing import Callable, Dict, Set

from flask import request as current_request

logger = logging.getLogger('ajax_api')

HTTP_METHODS = ('get', 'post', 'put', 'patch', 'delete', 'head', 'options')


def _is_ajax(req):
    return req.headers.get('X-Requested-With', '').lower() == 'xmlhttprequest'


def _is_htmx(req):
    return bool(req.headers.get('HX-Request'))


def _is_json(req):
    if req.is_json:
        return True
    best = req.accept_mimetypes.best_match(['application/json', 'text/html'])
    return best == 'application/json' and req.accept_mimetypes[best] > req.accept_mimetypes['text/html']


def _is_ssl(req):
    return req.is_secure


def _method_detector(method):
    def detector(req):
        return req.method.lower() == method
    detector.__name__ = f'_is_{method}'
    return detector


_DETECTORS: Dict[str, Callable] = {
    'ajax': _is_ajax,
    'htmx': _is_htmx,
    'json': _is_json,
    'ssl': _is_ssl,
}
_DETECTORS.update({method: _method_detector(method) for method in HTTP_METHODS})


def add_detector(name: str, detector: Callable) -> None:
    """Register a custom request kind; replaces any detector of the same name."""
    _DETECTORS[name.lower()] = detector


def remove_detector(name: str) -> None:
    _DETECTORS.pop(name.lower(), None)


def declared_kinds(req=None) -> Set[str]:
    """Return every registered kind the request matches."""
    req = req if req is not None else current_request
    return {name for name, detector in _DETECTORS.items() if detector(req)}


def request_is(kind: str, req=None) -> bool:
    """Check a single kind. Unknown kinds are never declared."""
    req = req if req is not None else current_request
    detector = _DETECTORS.get(str(kind).lower())
    if detector is None:
        logger.debug(f"No detector registered for request kind '{kind}'")
        return False
    return bool(detector(req))
