from todo_admin.models import Role


def test_root_redirects_anonymous_to_login(client):
    r = client.get('/')
    assert r.status_code in (301, 302)
    assert r.headers['Location'].endswith('/login')


def test_unauthenticated_redirects(client):
    for path in ('/dashboard', '/todos', '/users'):
        r = client.get(path)
        assert r.status_code in (301, 302), path


def test_login_and_dashboard(client, make_user):
    user = make_user(name='Dash User', email='dash@example.com')

    r = client.post('/login', data={'email': 'dash@example.com', 'password': 'password'},
                    follow_redirects=True)
    assert r.status_code == 200
    body = r.get_data(as_text=True)
    assert 'Dashboard' in body
    assert 'Welcome back, Dash User!' in body
    # regular users get no system totals or user link
    assert 'Manage users' not in body

    r = client.get('/')
    assert r.headers['Location'].endswith('/dashboard')


def test_admin_dashboard_shows_totals(client, make_user, login):
    login(make_user(role=Role.ADMIN))
    body = client.get('/dashboard').get_data(as_text=True)
    assert 'Manage users' in body


def test_bad_credentials(client, make_user):
    make_user(email='who@example.com')
    r = client.post('/login', data={'email': 'who@example.com', 'password': 'wrong-password'})
    assert r.status_code == 200
    assert 'These credentials do not match our records.' in r.get_data(as_text=True)
    assert client.get('/todos').status_code == 302


def test_next_only_follows_local_paths(client, make_user):
    make_user(email='nx@example.com')
    r = client.post('/login?next=/todos', data={'email': 'nx@example.com', 'password': 'password'})
    assert r.headers['Location'].endswith('/todos')
    client.get('/logout')

    r = client.post('/login?next=https://evil.example.com/',
                    data={'email': 'nx@example.com', 'password': 'password'})
    assert r.headers['Location'].endswith('/dashboard')


def test_logout(client, make_user, login):
    login(make_user())
    r = client.get('/logout')
    assert r.headers['Location'].endswith('/login')
    assert client.get('/dashboard').status_code == 302
