"""AJAX helper handed to route handlers.

Typical use inside a view:

    ajax.start()
    data = ajax.parse_form(method='POST')
    data = ajax.aliasing({'ContactLogModal': 'ContactLog'}, data)
    errors = ajax.validate_associated(ContactLog(), data)
    if errors is not True:
        return ajax.error('Validation failed', errors, 422)
    return ajax.end(data, 'Saved')
"""

from flask import request

from ajax_api.helpers import aliasing as alias_helpers
from ajax_api.helpers import validation
from ajax_api.helpers.form_parser import parse_form
from ajax_api.helpers.response_formatter import error_response, success_response
from ajax_api.middleware.ajax_gate import get_ajax_state, start_ajax
from utils.config import merge_config


class AjaxComponent:
    """Conveniences for endpoints answering in-page script requests."""

    def __init__(self, config=None):
        self.config = merge_config(config or {})
        self.settings = self.config['ajax']

    @property
    def state(self):
        return get_ajax_state()

    def start(self, request_type=None):
        """Require the request kind (default from config) and disable rendering and caching.

        Raises RequestTypeNotAllowed when the request is of another kind.
        """
        return start_ajax(request_type or self.settings['request_type'], self.settings['layout'])

    def parse_form(self, raw_form=None, method=None):
        """Decode a serialized form and return its `data` entry.

        Without `raw_form` the serialized string is read from the request
        form field configured as `form_field`. Raises FormMethodNotAllowed
        when `method` is set and differs from the form's `_method`, and
        FormDataMissing when the form carries no `data`.
        """
        if raw_form is None:
            raw_form = request.form.get(self.settings['form_field'], '')
        return parse_form(raw_form, method, self.settings['token_field'])

    def validate_associated(self, model, data, aliases=None):
        """Validate with associations; True or the errors grouped per model."""
        return validation.validate_associated(model, data, aliases)

    def end(self, data=None, message=None, code=200):
        return success_response(data, message, code)

    def error(self, message, data=None, code=400):
        return error_response(message, data, code)

    def aliasing(self, aliases, data):
        return alias_helpers.aliasing(aliases, data)

    def anti_aliasing(self, aliases, data):
        return alias_helpers.anti_aliasing(aliases, data)
