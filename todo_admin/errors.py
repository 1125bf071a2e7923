"""
Domain Errors

Expected, recoverable outcomes of a request. Each one is turned into a
response by the handlers registered in register_error_handlers().
"""

import logging
from urllib.parse import urlparse

from flask import flash, redirect, render_template, request, session, url_for

logger = logging.getLogger(__name__)

# Form fields never echoed back into the session after a failed submit
SECRET_FIELDS = ('password', 'password_confirmation', 'csrf_token')


class TodoAdminError(Exception):
    """Base class for all application errors."""


class ValidationError(TodoAdminError):
    """Input failed one or more rules.

    Args:
        errors: mapping of field name -> list of human readable messages
    """

    def __init__(self, errors):
        super().__init__('validation failed: ' + ', '.join(str(field) for field in errors))
        self.errors = {field: list(messages) for field, messages in errors.items()}

    def messages(self):
        """Flatten the error map in field order."""
        return [message for field in self.errors for message in self.errors[field]]


class ForbiddenError(TodoAdminError):
    """The actor is not allowed to perform the action."""


class NotFoundError(TodoAdminError):
    """A referenced record does not exist."""

    def __init__(self, model, ident):
        super().__init__(f'{model} {ident} not found')
        self.model = model
        self.ident = ident


def _back_url():
    """Referrer when it points at this host, otherwise the area's list page."""
    referrer = request.referrer
    if referrer and urlparse(referrer).netloc == request.host:
        return referrer
    if request.blueprint == 'users':
        return url_for('users.index')
    return url_for('todos.index')


def register_error_handlers(app):
    """Map domain errors onto responses."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        for message in error.messages():
            flash(message, 'danger')
        session['old_input'] = {
            key: value for key, value in request.form.items()
            if key not in SECRET_FIELDS
        }
        return redirect(_back_url())

    @app.errorhandler(ForbiddenError)
    def handle_forbidden(error):
        return render_template('errors/403.html'), 403

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        logger.debug('Lookup failed: %s', error)
        return render_template('errors/404.html'), 404

    @app.errorhandler(404)
    def handle_unknown_route(error):
        return render_template('errors/404.html'), 404
