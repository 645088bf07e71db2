"""
errors.py — Service-layer error types shared by every app.

The services raise these; the DRF exception handler in
``announcements_backend.exceptions`` turns them into HTTP responses.

- InvalidArgumentError: caller input that cannot be accepted
  (start/end ordering, unknown app slugs).
- RecordNotFoundError: an id or email that does not resolve. It is a kind of
  InvalidArgumentError so callers that only care about "bad input" can catch
  the parent.
- UniquenessError: a unique field (app slug, user email) collided. Raised from
  the database's IntegrityError, never from a pre-check.
- AuthError: the OAuth provider answered with something we cannot use.
"""


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        return type(self).__name__


class InvalidArgumentError(ServiceError):
    pass


class RecordNotFoundError(InvalidArgumentError):
    pass


class UniquenessError(ServiceError):
    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


class AuthError(ServiceError):
    pass
