"""
HTTP method override

HTML forms can only GET or POST. A POST carrying `?_method=PUT` (or an
X-HTTP-Method-Override header) is rewritten before routing so the views
keep their REST verbs.
"""

from urllib.parse import parse_qs


class MethodOverrideMiddleware:
    allowed_methods = frozenset(['PUT', 'PATCH', 'DELETE'])

    def __init__(self, app):
        self.app = app

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = environ.get('HTTP_X_HTTP_METHOD_OVERRIDE')
            if not method:
                query = parse_qs(environ.get('QUERY_STRING', ''))
                method = query.get('_method', [''])[0]
            method = method.upper()
            if method in self.allowed_methods:
                environ['REQUEST_METHOD'] = method
        return self.app(environ, start_response)
