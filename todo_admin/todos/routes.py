"""
Todo Routes

Thin HTTP layer over todo_admin.todos.services. Lookups happen first so a
missing id is a 404 before any other logic runs.
"""

from flask import render_template, request
from flask_login import current_user, login_required

from todo_admin.errors import ForbiddenError
from todo_admin.policies import can_view_todo
from todo_admin.todos import services
from todo_admin.todos.forms import TodoForm
from todo_admin.todos import todos_bp


def _viewable(todo_id):
    todo = services.find_todo(todo_id)
    if not can_view_todo(current_user, todo):
        raise ForbiddenError(f'view todo {todo.id}')
    return todo


@todos_bp.route('/todos', methods=['GET'])
@login_required
def index():
    todos = services.list_todos(current_user)
    return render_template('todos/index.html', todos=todos, form=TodoForm())


@todos_bp.route('/todos', methods=['POST'])
@login_required
def store():
    return services.create_todo(current_user, request.form).respond()


@todos_bp.route('/todos/<int:todo_id>', methods=['GET'])
@login_required
def show(todo_id):
    return render_template('todos/show.html', todo=_viewable(todo_id))


@todos_bp.route('/todos/<int:todo_id>/edit', methods=['GET'])
@login_required
def edit(todo_id):
    todo = _viewable(todo_id)
    return render_template('todos/edit.html', todo=todo, form=TodoForm(obj=todo))


@todos_bp.route('/todos/<int:todo_id>', methods=['PUT', 'PATCH'])
@login_required
def update(todo_id):
    todo = services.find_todo(todo_id)
    return services.update_todo(current_user, todo, request.form).respond()


@todos_bp.route('/todos/<int:todo_id>', methods=['DELETE'])
@login_required
def destroy(todo_id):
    todo = services.find_todo(todo_id)
    return services.delete_todo(current_user, todo).respond()
