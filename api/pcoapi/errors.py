class PCOError(Exception):
    pass


class AuthRequiredError(PCOError):
    pass


class BaseError(PCOError):
    """ An error response from the API.

    :param result: the Result that carried the error status
    """
    def __init__(self, result):
        self.status = result.status
        self.message = result.body
        self.headers = result.headers
        self.url = result.url
        super(BaseError, self).__init__(str(self))

    def __str__(self):
        return '{}: {}'.format(self.status, self.message)


class ClientError(BaseError):
    pass


class BadRequest(ClientError):
    pass


class Unauthorized(ClientError):
    pass


class Forbidden(ClientError):
    pass


class NotFound(ClientError):
    pass


class MethodNotAllowed(ClientError):
    pass


class UnprocessableEntity(ClientError):
    pass


class TooManyRequests(ClientError):
    pass


class ServerError(BaseError):
    pass


class InternalServerError(ServerError):
    pass


class UnexpectedStatusError(PCOError, RuntimeError):
    def __init__(self, result):
        self.status = result.status
        self.message = result.body
        super(UnexpectedStatusError, self).__init__(
            'unknown status {} for {}'.format(result.status, result.url))


def is_client_error(code):
    return 400 <= code <= 499


def is_server_error(code):
    return 500 <= code <= 599
