"""
Todo Rule Set

Create and update share the same shape.
"""

from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Length

from todo_admin.validation import RuleSet, max_length, required, strip


class TodoForm(RuleSet):
    title = StringField('Title', filters=[strip], validators=[
        DataRequired(message=required('title')),
        Length(max=255, message=max_length('title', 255)),
    ])
    description = TextAreaField('Description', filters=[strip], validators=[
        DataRequired(message=required('description')),
    ])
