from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from storefront.errors import ApiError, Unauthorized
from storefront.services.tokens import decode_token


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("authorization")
    if not header:
        return None
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() != "bearer" or not credentials.strip():
        raise Unauthorized("Malformed Authorization header")
    return credentials.strip()


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """Decode the bearer token, if any, onto ``request.state``.

    Public routes never look at the result, so a bad token is recorded as
    ``request.state.auth_error`` instead of failing the request here;
    ``deps.get_current_user`` raises it for protected routes.
    """

    async def dispatch(self, request, call_next):
        request.state.user_id = None
        request.state.auth_error = None
        try:
            token = _bearer_token(request)
            if token:
                request.state.user_id = decode_token(token)
        except ApiError as exc:
            request.state.auth_error = exc

        response = await call_next(request)
        return response
