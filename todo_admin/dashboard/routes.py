"""
Dashboard Routes

Landing page after login.
"""

from flask import redirect, render_template, url_for
from flask_login import current_user, login_required

from todo_admin.dashboard import dashboard_bp
from todo_admin.models import Todo, User
from todo_admin.policies import can_manage_users


@dashboard_bp.route('/')
def index():
    """Redirect to dashboard if logged in, otherwise to login"""
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.dashboard'))
    return redirect(url_for('auth.login'))


@dashboard_bp.route('/dashboard')
@login_required
def dashboard():
    """Todo count for the actor, plus system totals for admins"""
    own_todos = Todo.query.filter_by(user_id=current_user.id).count()
    totals = None
    if can_manage_users(current_user):
        totals = {'users': User.query.count(), 'todos': Todo.query.count()}
    
    return render_template('dashboard/dashboard.html',
                           own_todos=own_todos,
                           totals=totals)
