"""
User Rule Sets

UserCreateForm requires every field. UserUpdateForm accepts any subset:
an absent or blank field means "leave unchanged", a present one must pass
the same rules as on create. Email uniqueness ignores the account being
updated.
"""

from wtforms import PasswordField, StringField, validators
from wtforms.validators import AnyOf, DataRequired, Email, EqualTo, Length, Optional

from todo_admin.extensions import db
from todo_admin.models import Role, User
from todo_admin.validation import RuleSet, max_length, min_length, required, strip

EMAIL_TAKEN = 'The email has already been taken.'
EMAIL_INVALID = 'The email field must be a valid email address.'
PASSWORD_UNCONFIRMED = 'The password field confirmation does not match.'
ROLE_INVALID = 'The selected role is invalid.'


class UniqueEmail:
    """Read-only existence check against the users table.

    The form's `ignore_id` (if set) is excluded so an account can keep its
    own address. The database UNIQUE constraint remains the final word.
    """

    def __init__(self, message=EMAIL_TAKEN):
        self.message = message

    def __call__(self, form, field):
        query = db.session.query(User.id).filter(User.email == field.data)
        ignore_id = getattr(form, 'ignore_id', None)
        if ignore_id is not None:
            query = query.filter(User.id != ignore_id)
        if db.session.query(query.exists()).scalar():
            raise validators.ValidationError(self.message)


def _name_rules(first):
    return [first,
            Length(min=3, message=min_length('name', 3)),
            Length(max=255, message=max_length('name', 255))]


def _email_rules(first):
    return [first,
            Email(message=EMAIL_INVALID),
            Length(max=255, message=max_length('email', 255)),
            UniqueEmail()]


def _password_rules(first):
    return [first,
            Length(min=8, message=min_length('password', 8)),
            EqualTo('password_confirmation', message=PASSWORD_UNCONFIRMED)]


def _role_rules(first):
    return [first, AnyOf(Role.values(), message=ROLE_INVALID)]


class UserCreateForm(RuleSet):
    transient = ('password_confirmation',)

    name = StringField('Name', filters=[strip],
                       validators=_name_rules(DataRequired(message=required('name'))))
    email = StringField('Email', filters=[strip],
                        validators=_email_rules(DataRequired(message=required('email'))))
    password = PasswordField('Password',
                             validators=_password_rules(DataRequired(message=required('password'))))
    password_confirmation = PasswordField('Confirm password')
    role = StringField('Role', filters=[strip],
                       validators=_role_rules(DataRequired(message=required('role'))))


class UserUpdateForm(RuleSet):
    transient = ('password_confirmation',)

    name = StringField('Name', filters=[strip], validators=_name_rules(Optional()))
    email = StringField('Email', filters=[strip], validators=_email_rules(Optional()))
    password = PasswordField('Password', validators=_password_rules(Optional()))
    password_confirmation = PasswordField('Confirm password')
    role = StringField('Role', filters=[strip], validators=_role_rules(Optional()))

    def __init__(self, formdata=None, ignore_id=None, **kwargs):
        super().__init__(formdata=formdata, **kwargs)
        self.ignore_id = ignore_id
