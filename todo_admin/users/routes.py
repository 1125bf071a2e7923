"""
User Routes

Every view sits behind admin_required; non-admins never reach them.
"""

from flask import render_template, request
from flask_login import current_user

from todo_admin.auth.decorators import admin_required
from todo_admin.models import Role
from todo_admin.users import services
from todo_admin.users import users_bp
from todo_admin.users.forms import UserCreateForm, UserUpdateForm


@users_bp.route('/users', methods=['GET'])
@admin_required
def index():
    users = services.list_users()
    return render_template('users/index.html', users=users, form=UserCreateForm(),
                           roles=Role.values())


@users_bp.route('/users', methods=['POST'])
@admin_required
def store():
    return services.create_user(current_user, request.form).respond()


@users_bp.route('/users/<int:user_id>', methods=['GET'])
@admin_required
def show(user_id):
    return render_template('users/show.html', user=services.find_user(user_id))


@users_bp.route('/users/<int:user_id>/edit', methods=['GET'])
@admin_required
def edit(user_id):
    user = services.find_user(user_id)
    form = UserUpdateForm(data={'name': user.name, 'email': user.email, 'role': user.role.value})
    return render_template('users/edit.html', user=user, form=form, roles=Role.values())


@users_bp.route('/users/<int:user_id>', methods=['PUT', 'PATCH'])
@admin_required
def update(user_id):
    user = services.find_user(user_id)
    return services.update_user(current_user, user, request.form).respond()


@users_bp.route('/users/<int:user_id>', methods=['DELETE'])
@admin_required
def destroy(user_id):
    user = services.find_user(user_id)
    return services.delete_user(current_user, user).respond()
