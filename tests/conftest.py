import pytest

from todo_admin import create_app
from todo_admin.config import TestConfig
from todo_admin.extensions import db
from todo_admin.models import Role, Todo, User


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    counter = {'n': 0}

    def _make_user(role=Role.USER, email=None, password='password', name=None):
        counter['n'] += 1
        n = counter['n']
        user = User(name=name or f'User {n}', email=email or f'user{n}@example.com', role=role)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user
    return _make_user


@pytest.fixture()
def make_todo(app):
    def _make_todo(owner, title='Some task', description='Some details'):
        todo = Todo(title=title, description=description, user_id=owner.id)
        db.session.add(todo)
        db.session.commit()
        return todo
    return _make_todo


@pytest.fixture()
def login(client):
    def _login(user, password='password'):
        return client.post('/login', data={'email': user.email, 'password': password})
    return _login
