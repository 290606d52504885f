"""Error taxonomy shared by services and routers.

Every error carries a user-facing ``message`` and maps to one HTTP status.
Services raise these; ``storefront.main`` renders them as ``{"message": ...}``.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 400
    default_message = "Invalid request"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Authentication required"


class Forbidden(ApiError):
    status_code = 403
    default_message = "Admin privileges required"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"
