"""
Todo Administration - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, session

from todo_admin.config import Config
from todo_admin.extensions import csrf, db, login_manager


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    level = app.config.get('LOG_LEVEL', 'INFO')
    app.logger.setLevel(level)
    logging.getLogger('todo_admin').setLevel(level)
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'info'
    csrf.init_app(app)
    
    # Browser forms tunnel PUT/DELETE through POST
    from todo_admin.middleware import MethodOverrideMiddleware
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)
    
    # Register blueprints
    from todo_admin.auth import auth_bp
    from todo_admin.dashboard import dashboard_bp
    from todo_admin.todos import todos_bp
    from todo_admin.users import users_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(todos_bp)
    app.register_blueprint(users_bp)
    
    from todo_admin.errors import register_error_handlers
    register_error_handlers(app)
    
    from todo_admin.cli import create_admin_command
    app.cli.add_command(create_admin_command)
    
    @app.context_processor
    def inject_template_helpers():
        """Policies for the templates, plus input kept from a rejected form (read once)."""
        from todo_admin import policies
        return dict(policies=policies, old_input=session.pop('old_input', {}))
    
    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from todo_admin.models import User
        return db.session.get(User, int(user_id))
    
    # Create database tables
    with app.app_context():
        _ensure_sqlite_directory(app.config['SQLALCHEMY_DATABASE_URI'])
        from todo_admin import models  # noqa: F401
        db.create_all()
    
    return app


def _ensure_sqlite_directory(uri):
    """Create the parent directory of a file-backed SQLite database."""
    prefix = 'sqlite:///'
    if not uri.startswith(prefix) or uri.endswith(':memory:'):
        return
    directory = os.path.dirname(uri[len(prefix):])
    if directory:
        os.makedirs(directory, exist_ok=True)
