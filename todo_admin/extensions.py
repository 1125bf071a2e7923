"""
Flask Extensions

Shared extension instances, bound to the application in create_app().
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_wtf.csrf import CSRFProtect

# Database instance
db = SQLAlchemy()

# Session-based authentication for every account, admins included
login_manager = LoginManager()

# CSRF protection for all form posts
csrf = CSRFProtect()
