from typing import Dict, Iterable, Tuple


class ApiError(Exception):
    """Error that maps onto an HTTP status and a client-safe message."""

    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = "Validation failed"

    @classmethod
    def from_messages(cls, messages: Iterable[str]) -> "ValidationError":
        joined = ", ".join(m for m in messages if m)
        return cls(joined or None)


class Unauthenticated(ApiError):
    status_code = 401
    default_message = "User not authenticated"


class InvalidToken(Unauthenticated):
    default_message = "Invalid or expired token"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Conflict"


class InternalError(ApiError):
    status_code = 500


# ---------------------------
# Identity provider errors
# ---------------------------

PROVIDER_ERRORS: Dict[str, Tuple[int, str]] = {
    "auth/email-already-exists": (409, "An account with this email already exists"),
    "auth/user-not-found": (404, "No user found with this email"),
    "auth/wrong-password": (401, "Invalid email or password"),
    "auth/invalid-email": (400, "The email address is invalid"),
    "auth/weak-password": (400, "The password is too weak"),
}


class IdentityProviderError(Exception):
    """Raised by the identity provider with a provider-specific code."""

    def __init__(self, code: str, detail: str = ""):
        self.code = code
        self.detail = detail
        super().__init__(f"{code}: {detail}" if detail else code)


def translate_provider_error(error: IdentityProviderError) -> ApiError:
    status_code, message = PROVIDER_ERRORS.get(
        error.code, (InternalError.status_code, InternalError.default_message)
    )
    return ApiError(message, status_code)
