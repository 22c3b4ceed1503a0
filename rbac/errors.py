# UniResearch - Access control failures (terminal for the request)
from .models import ErrorResponse


class AccessControlError(Exception):
    status_code: int = 403
    default_message: str = "Access denied"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(success=False, message=self.message)


class Unauthenticated(AccessControlError):
    """No principal on the request."""
    status_code = 401
    default_message = "Authentication required"


class Forbidden(AccessControlError):
    """Principal present but lacks the permission (or ownership)."""
    status_code = 403
    default_message = "Insufficient permissions"
