"""
Auth Routes

User authentication routes using Flask-Login. Accounts are created by
admins only, so there is no registration route.
"""

import logging
from urllib.parse import urlparse

from flask import flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user

from todo_admin.auth import auth_bp
from todo_admin.models import User

logger = logging.getLogger(__name__)


def _safe_next(target):
    """Only follow relative `next` targets on this site."""
    if not target:
        return None
    parts = urlparse(target)
    if parts.scheme or parts.netloc:
        return None
    return target


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if current_user.is_authenticated:
        return redirect(url_for('dashboard.dashboard'))
    
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        remember = bool(request.form.get('remember'))
        
        if not email or not password:
            flash('Please provide both email and password.', 'danger')
            return render_template('auth/login.html', email=email)
        
        user = User.query.filter_by(email=email).first()
        
        if user and user.check_password(password):
            login_user(user, remember=remember)
            logger.info('User %s signed in', user.id)
            flash(f'Welcome back, {user.name}!', 'success')
            
            next_page = _safe_next(request.args.get('next'))
            return redirect(next_page) if next_page else redirect(url_for('dashboard.dashboard'))
        
        logger.info('Failed sign-in for %s', email)
        flash('These credentials do not match our records.', 'danger')
        return render_template('auth/login.html', email=email)
    
    return render_template('auth/login.html')


@auth_bp.route('/logout')
@login_required
def logout():
    """User logout route"""
    logout_user()
    flash('You have been logged out successfully.', 'info')
    return redirect(url_for('auth.login'))
