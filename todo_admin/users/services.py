"""
User Services

Account management. Callers are already past the admin gate; the actor
is passed along for the audit log only.
"""

import logging

from todo_admin.extensions import db
from todo_admin.models import Role, User
from todo_admin.outcomes import Outcome
from todo_admin.persistence import commit, get_or_raise
from todo_admin.users.forms import EMAIL_TAKEN, UserCreateForm, UserUpdateForm

logger = logging.getLogger(__name__)


def _actor_id(actor):
    return getattr(actor, 'id', None)


def find_user(user_id):
    return get_or_raise(User, user_id)


def list_users():
    return User.query.order_by(User.created_at.desc(), User.id.desc()).all()


def create_user(actor, formdata):
    record = UserCreateForm(formdata).validated()
    user = User(name=record['name'], email=record['email'], role=Role(record['role']))
    user.set_password(record['password'])
    db.session.add(user)
    commit(unique_messages={'email': EMAIL_TAKEN})
    logger.info('User %s created account %s (%s)', _actor_id(actor), user.id, user.role.value)
    return Outcome('users.index', 'User created successfully')


def update_user(actor, user, formdata):
    """Apply whichever of name, email, password and role were supplied."""
    record = UserUpdateForm(formdata, ignore_id=user.id).validated()
    if 'name' in record:
        user.name = record['name']
    if 'email' in record:
        user.email = record['email']
    if 'role' in record:
        user.role = Role(record['role'])
    if 'password' in record:
        user.set_password(record['password'])
    commit(unique_messages={'email': EMAIL_TAKEN})
    logger.info('User %s updated account %s (fields: %s)',
                _actor_id(actor), user.id, ', '.join(sorted(record)) or 'none')
    return Outcome('users.index', 'User update successfully')


def delete_user(actor, user):
    """Remove the account; its todos go with it."""
    user_id = user.id
    db.session.delete(user)
    commit()
    logger.info('User %s deleted account %s', _actor_id(actor), user_id)
    return Outcome('users.index', 'User delete successfully')
