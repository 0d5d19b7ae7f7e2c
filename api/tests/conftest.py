import json

import pytest
# noinspection PyPackageRequirements
from mock import patch, DEFAULT, Mock

from pcoapi import Endpoint


def make_response(status_code=200,
                  body=None,
                  content_type='application/json; charset=utf-8',
                  headers=None,
                  url='https://api.planningcenteronline.com/'):
    """ Build a fake requests.Response. """
    response = Mock(name='response')
    response.status_code = status_code
    response.ok = status_code < 400
    response.url = url
    response.headers = dict(headers or {})
    if content_type is not None:
        response.headers['Content-Type'] = content_type
    if body is None:
        response.text = ''
    elif isinstance(body, str):
        response.text = body
    else:
        response.text = json.dumps(body)
    response.json.side_effect = lambda: json.loads(response.text)
    return response


@pytest.fixture
def mocked_session():
    with patch.multiple('requests.Session',
                        get=DEFAULT,
                        post=DEFAULT,
                        patch=DEFAULT,
                        delete=DEFAULT) as mocks:
        for mock in mocks.values():
            mock.return_value = make_response()
        yield mocks


@pytest.fixture
def api(mocked_session):
    return Endpoint(basic_auth_token='abc', basic_auth_secret='xyz')
