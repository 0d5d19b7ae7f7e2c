"""
Contains the Endpoint class, an open-ended interface to
the Planning Center Online RESTful API.
"""
import json
import os
import re
from threading import Lock

from .connection import Connection, JSON_CONTENT_TYPE, FORM_CONTENT_TYPE
from .errors import (
    BadRequest, Unauthorized, Forbidden, NotFound, MethodNotAllowed,
    UnprocessableEntity, TooManyRequests, ClientError, InternalServerError,
    ServerError, UnexpectedStatusError, is_client_error, is_server_error
)
from .query import build_nested_query

URL = 'https://api.planningcenteronline.com'

CLIENT_ERRORS = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    405: MethodNotAllowed,
    422: UnprocessableEntity,
    429: TooManyRequests,
}


def build_response(result):
    """ Turn a Result into a response envelope, or raise its error.

    :param result: a Result from the connection
    :return: the decoded body with the response headers added under
        'headers'
    """
    status = result.status
    if 200 <= status <= 299:
        body = result.body
        if body is None or body == '':
            body = {}
        if isinstance(body, dict):
            body = dict(body)
            body['headers'] = result.headers
        return body
    if status in CLIENT_ERRORS:
        raise CLIENT_ERRORS[status](result)
    if is_client_error(status):
        raise ClientError(result)
    if status == 500:
        raise InternalServerError(result)
    if is_server_error(status):
        raise ServerError(result)
    raise UnexpectedStatusError(result)


class Endpoint:
    """ One URL in the API, and a builder for the URLs below it.

    Attribute access and indexing build child endpoints without any network
    traffic, and the same child is returned every time for the same name.

    >>> import pcoapi
    >>> api = pcoapi.Endpoint(basic_auth_token='abc', basic_auth_secret='xyz')
    >>> api.people.v2.people[1].url
    'https://api.planningcenteronline.com/people/v2/people/1'
    >>> person = api.people.v2.people[1].get()
    >>> person['data']['attributes']['first_name']
    'Pico'

    Requests go out from get(), post(), patch(), and delete(). Segments that
    start with an underscore or clash with a method or attribute name (get,
    url, path, connection, last_result, exists) can be reached with indexing:
    api.people.v2['get'], api.people.v2['path'].

    The child cache is safe to share between threads, but last_result is not:
    don't make concurrent requests through the same endpoint.
    """
    def __init__(self,
                 url=URL,
                 oauth_access_token=None,
                 basic_auth_token=None,
                 basic_auth_secret=None,
                 connection=None):
        self.url = url
        self.connection = connection or Connection(
            basic_auth_token=basic_auth_token,
            basic_auth_secret=basic_auth_secret,
            oauth_access_token=oauth_access_token)
        self.last_result = None
        self._cache = {}
        self._cache_lock = Lock()

    @classmethod
    def from_environment(cls, environ=None):
        """ Build a root endpoint from PCO_API_* environment variables.

        PCO_API_TOKEN and PCO_API_SECRET give basic auth credentials,
        PCO_API_ACCESS_TOKEN gives an OAuth access token, and PCO_API_URL
        overrides the server.
        """
        if environ is None:
            environ = os.environ
        return cls(url=environ.get('PCO_API_URL', URL),
                   oauth_access_token=environ.get('PCO_API_ACCESS_TOKEN'),
                   basic_auth_token=environ.get('PCO_API_TOKEN'),
                   basic_auth_secret=environ.get('PCO_API_SECRET'))

    @property
    def path(self):
        return self.url

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return self._build_endpoint(name)

    def __getitem__(self, id):
        return self._build_endpoint(str(id))

    def __repr__(self):
        return '<Endpoint {}>'.format(self.url)

    def exists(self, name):
        """ Check whether a child endpoint can be fetched.

        This sends a real GET request to the child.

        :param name: the child's segment name or id
        :return: False if the server says the child is not found, otherwise
            True. Any other error is raised.
        """
        endpoint = self._build_endpoint(str(name))
        try:
            endpoint.get()
        except NotFound:
            return False
        return True

    def get(self, params=None):
        self.last_result = self.connection.get(self.url, params or {})
        return build_response(self.last_result)

    def post(self, body=None):
        data, content_type = self._build_body(body)
        self.last_result = self.connection.post(self.url,
                                                data=data,
                                                content_type=content_type)
        return build_response(self.last_result)

    def patch(self, body=None):
        """ Send a PATCH request, usually with a body like {'data': {...}}. """
        data, content_type = self._build_body(body)
        self.last_result = self.connection.patch(self.url,
                                                 data=data,
                                                 content_type=content_type)
        return build_response(self.last_result)

    def delete(self):
        """ Send a DELETE request.

        :return: True for a 204 No Content response, otherwise the response
            envelope
        """
        self.last_result = self.connection.delete(self.url)
        if self.last_result.status == 204:
            return True
        return build_response(self.last_result)

    def _build_body(self, body):
        if body is None:
            body = {}
        if self._needs_url_encoded():
            return build_nested_query(body), FORM_CONTENT_TYPE
        return json.dumps(body), JSON_CONTENT_TYPE

    def _needs_url_encoded(self):
        return re.search(r'oauth/[a-z]+\Z', self.url) is not None

    def _build_endpoint(self, name):
        with self._cache_lock:
            endpoint = self._cache.get(name)
            if endpoint is None:
                endpoint = type(self)(
                    url=self.url.rstrip('/') + '/' + name.lstrip('/'),
                    connection=self.connection)
                self._cache[name] = endpoint
            return endpoint
