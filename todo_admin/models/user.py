"""
User Model
"""

import enum
from datetime import datetime

from flask import current_app
from flask_login import UserMixin
from werkzeug.security import check_password_hash, generate_password_hash

from todo_admin.extensions import db


class Role(str, enum.Enum):
    """Closed set of account roles."""
    USER = 'user'
    ADMIN = 'admin'

    @classmethod
    def values(cls):
        return [role.value for role in cls]


class User(UserMixin, db.Model):
    """Account that owns todos; admins manage every account and todo."""
    __tablename__ = 'users'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(
        db.Enum(Role, name='user_role', values_callable=lambda roles: [r.value for r in roles],
                validate_strings=True),
        default=Role.USER, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Deleting an account deletes the todos it owns
    todos = db.relationship('Todo', back_populates='owner', lazy=True,
                            cascade='all, delete-orphan')
    
    @property
    def is_admin(self):
        return self.role is Role.ADMIN
    
    def set_password(self, password):
        """Store a one-way hash of `password`; the plaintext is never kept."""
        method = current_app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
        self.password_hash = generate_password_hash(password, method=method)
    
    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
    
    def __repr__(self):
        return f'<User {self.email} ({self.role.value if self.role else "?"})>'
