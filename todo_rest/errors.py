"""
Error taxonomy shared by the store and the HTTP layer.

Each error carries an ``ErrorKind``; ``STATUS_CODES`` maps every kind to the
HTTP status the service answers with. Anything that is not a ``TodoError``
is answered with 500.
"""

import enum


class ErrorKind(enum.Enum):
    QUERY = "query"
    NOT_SUPPORTED = "not_supported"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    CONNECTION = "connection"


STATUS_CODES = {
    ErrorKind.CONNECTION: 503,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.QUERY: 409,
    ErrorKind.NOT_SUPPORTED: 409,
    ErrorKind.NOT_FOUND: 404,
}

INTERNAL_ERROR_STATUS = 500
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class TodoError(Exception):
    kind: ErrorKind = ErrorKind.QUERY

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @property
    def public_message(self) -> str:
        """Text placed in the ``error`` field of the response body."""
        return self.message


class QueryError(TodoError):
    """The store rejected or failed a statement for a reason other than absence."""

    kind = ErrorKind.QUERY


class NotSupportedError(TodoError):
    """The insert succeeded but the driver could not report the generated id."""

    kind = ErrorKind.NOT_SUPPORTED


class NotFoundError(TodoError):
    kind = ErrorKind.NOT_FOUND


class BadRequestError(TodoError):
    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)

    @property
    def public_message(self) -> str:
        return "Bad Request"


class StoreConnectionError(TodoError):
    """The store could not be reached."""

    kind = ErrorKind.CONNECTION

    @property
    def public_message(self) -> str:
        return "DB_CONNECTION_FAIL"
