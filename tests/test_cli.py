from todo_admin.cli import create_admin_command
from todo_admin.models import Role, User


def test_create_admin(app):
    runner = app.test_cli_runner()
    result = runner.invoke(create_admin_command, ['--name', 'Root Admin',
                                                  '--email', 'root@example.com',
                                                  '--password', 'supersecret'])
    assert result.exit_code == 0, result.output
    assert 'New admin user root@example.com created' in result.output
    user = User.query.filter_by(email='root@example.com').one()
    assert user.role is Role.ADMIN
    assert user.check_password('supersecret')


def test_promote_existing_user(app, make_user):
    make_user(email='promote@example.com')
    runner = app.test_cli_runner()
    result = runner.invoke(create_admin_command, ['--email', 'promote@example.com'])
    assert result.exit_code == 0, result.output
    assert User.query.filter_by(email='promote@example.com').one().is_admin


def test_invalid_input_is_reported(app):
    runner = app.test_cli_runner()
    result = runner.invoke(create_admin_command, ['--name', 'Ad',
                                                  '--email', 'bad@example.com',
                                                  '--password', 'short'])
    assert result.exit_code != 0
    assert 'The name field must be at least 3 characters.' in result.output
    assert User.query.count() == 0


def test_password_is_prompted_for_new_account(app):
    runner = app.test_cli_runner()
    result = runner.invoke(create_admin_command, ['--name', 'Prompted Admin',
                                                  '--email', 'prompted@example.com'],
                           input='supersecret\nsupersecret\n')
    assert result.exit_code == 0, result.output
    assert User.query.filter_by(email='prompted@example.com').one().check_password('supersecret')
