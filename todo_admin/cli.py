"""
CLI commands

There is no self-registration, so the first admin account comes from here:

    flask --app app create-admin --name Admin --email admin@example.com
"""

import click
from flask.cli import with_appcontext
from werkzeug.datastructures import MultiDict

from todo_admin.errors import ValidationError
from todo_admin.extensions import db
from todo_admin.models import Role, User
from todo_admin.users.services import create_user


@click.command('create-admin')
@click.option('--name', help='Display name for a new account.')
@click.option('--email', required=True, help='Account email; an existing account is promoted.')
@click.option('--password', help='Password for a new account; prompted for when omitted.')
@with_appcontext
def create_admin_command(name, email, password):
    """Create an admin account or promote an existing one."""
    user = User.query.filter_by(email=email).first()
    if user:
        user.role = Role.ADMIN
        db.session.commit()
        click.echo(f'Existing user {email} promoted to admin')
        return
    
    if password is None:
        password = click.prompt('Password', hide_input=True, confirmation_prompt=True)

    formdata = MultiDict({
        'name': name,
        'email': email,
        'password': password,
        'password_confirmation': password,
        'role': Role.ADMIN.value,
    })
    try:
        create_user(None, formdata)
    except ValidationError as e:
        raise click.ClickException(' '.join(e.messages()))
    click.echo(f'New admin user {email} created')
