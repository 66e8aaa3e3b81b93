"""Typed failures raised by the service layer.

Services never touch HTTP. Each error carries the status code and
detail the API boundary should answer with; the mapping happens in
one exception handler registered by create_app().
"""


class ServiceError(Exception):
    """Base class for client-facing service failures."""

    status_code: int = 400
    detail: str = "Bad request"

    def __init__(self, detail: str | None = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class InvalidCredentials(ServiceError):
    """Signin failed.

    Same message whether the email is unknown or the password is wrong,
    so callers cannot probe which accounts exist.
    """

    status_code = 403
    detail = "Credentials incorrect"


class DuplicateCredential(ServiceError):
    """Email is already registered to another account."""

    status_code = 403
    detail = "Credentials taken"


class AccessDenied(ServiceError):
    """Bookmark is missing or owned by someone else."""

    status_code = 403
    detail = "Access to resource denied"


class Unauthenticated(ServiceError):
    """Missing, expired, or invalid bearer token."""

    status_code = 401
    detail = "Authentication required"
