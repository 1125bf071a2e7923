"""
Models Package

Exports all models for easy importing.
"""

from todo_admin.models.user import Role, User
from todo_admin.models.todo import Todo

__all__ = ['Role', 'User', 'Todo']
