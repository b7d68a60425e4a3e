from typing import Optional


class ModelListError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class AuthenticationError(ModelListError):
    """The service rejected the API key (missing, malformed or revoked)."""


class TransportError(ModelListError):
    """Network failure, timeout or non-2xx answer from the service."""
