from flask import Blueprint

todos_bp = Blueprint('todos', __name__)

from todo_admin.todos import routes  # noqa: E402, F401
