"""
Contains the session class that talks to the
Planning Center Online API over HTTP.
"""
import logging
import re
from collections import namedtuple

# noinspection PyPackageRequirements
from requests import Session
# noinspection PyPackageRequirements
from requests.auth import AuthBase

from .errors import AuthRequiredError

logger = logging.getLogger('pcoapi')

JSON_CONTENT_TYPE = 'application/json'
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

Result = namedtuple('Result', 'status headers body url')


class BearerAuth(AuthBase):
    """ Sends an OAuth2 access token in the Authorization header.

    Set as Session.auth, so requests won't replace it with ~/.netrc
    credentials.
    """
    def __init__(self, token):
        self.token = token

    def __eq__(self, other):
        return self.token == getattr(other, 'token', None)

    def __ne__(self, other):
        return not (self == other)

    def __call__(self, request):
        request.headers['Authorization'] = 'Bearer {}'.format(self.token)
        return request


class Connection(Session):
    """
    An authenticated session that decodes JSON responses.

    Every verb returns a Result with the status code, the response headers,
    and the decoded body. Error statuses are returned, not raised; the
    Endpoint decides what they mean.
    """
    def __init__(self,
                 basic_auth_token=None,
                 basic_auth_secret=None,
                 oauth_access_token=None,
                 timeout=None):
        super(Connection, self).__init__()
        if basic_auth_token and basic_auth_secret:
            self.auth = (basic_auth_token, basic_auth_secret)
        elif oauth_access_token:
            self.auth = BearerAuth(oauth_access_token)
        else:
            raise AuthRequiredError(
                'You must specify either HTTP basic auth credentials or an '
                'OAuth2 access token.')
        self.headers['Accept'] = JSON_CONTENT_TYPE
        self.timeout = timeout

    def _prep_kwargs(self, kwargs):
        if self.timeout is not None:
            kwargs.setdefault('timeout', self.timeout)
        return kwargs

    def _build_result(self, response):
        if not response.ok:
            logger.warning('Error response %d for %s: %s',
                           response.status_code,
                           response.url,
                           response.text)
        return Result(status=response.status_code,
                      headers=response.headers,
                      body=self._decode_body(response),
                      url=response.url)

    @staticmethod
    def _decode_body(response):
        text = response.text
        if not text:
            return None if response.ok else text
        content_type = response.headers.get('Content-Type') or ''
        media_type = content_type.split(';')[0].strip()
        if re.search(r'\bjson$', media_type):
            try:
                return response.json()
            except ValueError:
                logger.debug('Response from %s is not valid JSON.',
                             response.url)
        return text

    def get(self, url, params=None):
        logger.debug('GET %s %r', url, params)
        response = super(Connection, self).get(
            url,
            **self._prep_kwargs(dict(params=params or {})))
        return self._build_result(response)

    def post(self, url, data=None, content_type=JSON_CONTENT_TYPE):
        logger.debug('POST %s', url)
        response = super(Connection, self).post(
            url,
            **self._prep_kwargs(dict(data=data,
                                     headers={'Content-Type': content_type})))
        return self._build_result(response)

    def patch(self, url, data=None, content_type=JSON_CONTENT_TYPE):
        logger.debug('PATCH %s', url)
        response = super(Connection, self).patch(
            url,
            **self._prep_kwargs(dict(data=data,
                                     headers={'Content-Type': content_type})))
        return self._build_result(response)

    def delete(self, url):
        logger.debug('DELETE %s', url)
        response = super(Connection, self).delete(url,
                                                  **self._prep_kwargs({}))
        return self._build_result(response)
