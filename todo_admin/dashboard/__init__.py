from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from todo_admin.dashboard import routes  # noqa: E402, F401
