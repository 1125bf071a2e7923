"""
Validation

Rule sets are declarative WTForms schemas (field -> list of validators).
RuleSet.validated() runs every field, collects every message and either
returns the normalized record or raises ValidationError with the field map.
"""

from wtforms import Form

from todo_admin.errors import ValidationError


def strip(value):
    """Trim surrounding whitespace from submitted strings."""
    return value.strip() if isinstance(value, str) else value


def required(field):
    return f'The {field} field is required.'


def min_length(field, n):
    return f'The {field} field must be at least {n} characters.'


def max_length(field, n):
    return f'The {field} field must not be greater than {n} characters.'


class RuleSet(Form):
    """Base class for request rule sets.

    Subclasses list the fields that must never reach the normalized record
    (confirmation fields and the like) in `transient`.
    """

    transient = ()

    def validated(self):
        """Return the supplied, passing fields or raise ValidationError."""
        if not self.validate():
            raise ValidationError(self.errors)
        return {
            name: field.data
            for name, field in self._fields.items()
            if name not in self.transient and field.data not in (None, '')
        }
