"""
Admin Decorator

Coarse gate in front of the user-management area, checked before the
view runs and independent of any particular record.
"""

import logging
from functools import wraps

from flask import flash, redirect, url_for
from flask_login import current_user

from todo_admin.extensions import login_manager
from todo_admin.policies import can_manage_users

logger = logging.getLogger(__name__)


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin.
    
    - Anonymous visitors go through Flask-Login's unauthorized flow (login page)
    - Signed-in non-admins are sent back to their dashboard
    - The wrapped view never runs for either
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            return login_manager.unauthorized()
        if not can_manage_users(current_user):
            logger.warning('User %s denied access to %s', current_user.id, f.__name__)
            flash('You are not authorized to manage users.', 'warning')
            return redirect(url_for('dashboard.dashboard'))
        return f(*args, **kwargs)
    return wrapper
