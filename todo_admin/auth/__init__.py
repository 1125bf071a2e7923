"""
Auth Blueprint

Session login for every account. The role stored on the account decides
what the session may do afterwards.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from todo_admin.auth import routes  # noqa: E402, F401
