"""
Todo Services

Validate, authorize, persist. Every function takes the acting user
explicitly and returns data or an Outcome.
"""

import logging

from todo_admin.errors import ForbiddenError
from todo_admin.extensions import db
from todo_admin.models import Todo
from todo_admin.outcomes import Outcome
from todo_admin.persistence import commit, get_or_raise
from todo_admin.policies import can_delete_todo, can_list_all_todos, can_update_todo
from todo_admin.todos.forms import TodoForm

logger = logging.getLogger(__name__)


def find_todo(todo_id):
    return get_or_raise(Todo, todo_id)


def list_todos(actor):
    """Newest first; admins see every todo, everyone else only their own."""
    query = Todo.query
    if not can_list_all_todos(actor):
        query = query.filter_by(user_id=actor.id)
    return query.order_by(Todo.created_at.desc(), Todo.id.desc()).all()


def create_todo(actor, formdata):
    record = TodoForm(formdata).validated()
    todo = Todo(title=record['title'], description=record['description'], user_id=actor.id)
    db.session.add(todo)
    commit()
    logger.info('User %s created todo %s', actor.id, todo.id)
    return Outcome('todos.index', 'Todo create successfully')


def update_todo(actor, todo, formdata):
    """Only title and description change; the owner is fixed at creation."""
    record = TodoForm(formdata).validated()
    if not can_update_todo(actor, todo):
        logger.warning('User %s denied update of todo %s', actor.id, todo.id)
        raise ForbiddenError(f'update todo {todo.id}')
    todo.title = record['title']
    todo.description = record['description']
    commit()
    logger.info('User %s updated todo %s', actor.id, todo.id)
    return Outcome('todos.index', 'Todo update successfully')


def delete_todo(actor, todo):
    if not can_delete_todo(actor, todo):
        logger.warning('User %s denied delete of todo %s', actor.id, todo.id)
        raise ForbiddenError(f'delete todo {todo.id}')
    todo_id = todo.id
    db.session.delete(todo)
    commit()
    logger.info('User %s deleted todo %s', actor.id, todo_id)
    return Outcome('todos.index', 'Todo delete successfully')
