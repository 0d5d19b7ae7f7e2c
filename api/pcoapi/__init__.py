"""
This init module provides the exception classes
and an alias to the main Endpoint object.
"""


from .errors import (
    PCOError, AuthRequiredError, BaseError, ClientError, BadRequest,
    Unauthorized, Forbidden, NotFound, MethodNotAllowed, UnprocessableEntity,
    TooManyRequests, ServerError, InternalServerError, UnexpectedStatusError
)
from .connection import Connection, Result
from .endpoint import Endpoint, URL
pco = Endpoint
