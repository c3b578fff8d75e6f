"""
Backend API domain exceptions.
"""


class ApiClientError(Exception):
    """Base exception for marketplace backend calls."""

    pass


class TransportError(ApiClientError):
    """Raised when the backend cannot be reached (network error or timeout)."""

    def __init__(self, message: str, url: str = None):
        self.message = message
        self.url = url
        super().__init__(message)


class HttpStatusError(ApiClientError):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class InvalidResponseError(ApiClientError):
    """Raised when a successful response declares JSON but cannot be decoded."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid JSON response from {url}: {reason}")


class RequestCancelledError(ApiClientError):
    """Raised when a request is aborted through its cancel token.

    Callers drop this silently instead of showing it as a failure.
    """

    def __init__(self, url: str = None):
        self.url = url
        super().__init__(f"Request to {url} was cancelled" if url else "Request was cancelled")
