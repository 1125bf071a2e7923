"""
Todo Model
"""

from datetime import datetime

from todo_admin.extensions import db


class Todo(db.Model):
    """A task owned by exactly one user"""
    __tablename__ = 'todos'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    # Set once at creation, never reassigned
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'),
                        nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    owner = db.relationship('User', back_populates='todos')
    
    def __repr__(self):
        return f'<Todo {self.id} owner:{self.user_id}>'
