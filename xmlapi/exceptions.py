class XmlApiError(Exception):
    """Base error for everything the client raises."""


class TransportError(XmlApiError):
    """The request never produced an HTTP response."""


class SerializationError(XmlApiError):
    """The request body could not be encoded as JSON."""


class DecodeError(SerializationError):
    """The response body was not the JSON shape the operation expects."""


class AuthorizationError(XmlApiError):
    """/authorize failed or answered without a token."""

    def __init__(self, message, status_code=None, detail=''):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class OperationError(XmlApiError):
    """The service answered 2xx but its envelope carries an error message."""


class HTTPStatusError(XmlApiError):
    """Final response status was >= 400. ``detail`` is the raw response body."""

    def __init__(self, status_code, detail=''):
        super().__init__(detail or f"HTTP {status_code}")
        self.status_code = status_code
        self.detail = detail


class UnauthorizedError(HTTPStatusError):
    """Still 401 after reauthorizing and retrying once."""
