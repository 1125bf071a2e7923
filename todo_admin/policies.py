"""
Authorization Policies

One pure predicate per (actor, action, resource). Handlers call these and
branch on the result; no role or ownership comparison lives anywhere else.
"""

from todo_admin.models import Role


def _is_admin(actor):
    # Anything outside the enumeration is denied
    return getattr(actor, 'role', None) is Role.ADMIN


def _owns(actor, todo):
    actor_id = getattr(actor, 'id', None)
    return actor_id is not None and actor_id == todo.user_id


def can_view_todo(actor, todo):
    """Owner or any admin may open a todo's detail and edit pages."""
    return _owns(actor, todo) or _is_admin(actor)


def can_update_todo(actor, todo):
    return _owns(actor, todo) or _is_admin(actor)


def can_delete_todo(actor, todo):
    return _owns(actor, todo) or _is_admin(actor)


def can_manage_users(actor):
    """Coarse gate for the whole user-management area."""
    return _is_admin(actor)


def can_list_all_todos(actor):
    """Admins list every todo; everyone else is scoped to their own rows."""
    return _is_admin(actor)
