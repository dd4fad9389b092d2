"""Contact log routes answering the in-page contact form."""

from flask import Blueprint
import logging

from ajax_api.middleware.error_handler import handle_errors
from ajax_api.models import ContactLog

logger = logging.getLogger('ajax_api')

# The view posts the form as ContactLogModal
ALIASES = {'ContactLogModal': 'ContactLog'}


def register_routes(app, ajax):
    """Register contact log routes with the Flask app."""

    bp = Blueprint('contact_logs', __name__)

    @bp.route('/api/ping', methods=['GET'])
    @handle_errors
    def ping():
        ajax.start()
        return ajax.end({'pong': True})

    @bp.route('/api/contact-logs/validate', methods=['POST'])
    @handle_errors
    def validate_contact_log():
        """Validate a serialized contact log form with its contact."""
        ajax.start()
        data = ajax.aliasing(ALIASES, ajax.parse_form(method='POST'))

        errors = ajax.validate_associated(ContactLog(), data, ALIASES)
        if errors is not True:
            logger.info(f"Contact log rejected: {', '.join(errors)}")
            return ajax.error('Validation failed', errors, 422)

        return ajax.end(ajax.anti_aliasing(ALIASES, data), 'The contact log is valid')

    @bp.route('/api/contact-logs/<int:log_id>', methods=['POST', 'PUT'])
    @handle_errors
    def update_contact_log(log_id):
        """Accept an edit form; browsers post it with _method=PUT."""
        ajax.start()
        data = ajax.aliasing(ALIASES, ajax.parse_form(method='PUT'))

        errors = ajax.validate_associated(ContactLog(), data, ALIASES)
        if errors is not True:
            return ajax.error('Validation failed', errors, 422)

        record = dict(data.get('ContactLog') or {}, id=log_id)
        data['ContactLog'] = record
        return ajax.end(ajax.anti_aliasing(ALIASES, data), 'The contact log was updated')

    app.register_blueprint(bp)
