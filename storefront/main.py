import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware import Middleware
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.config import settings
from storefront.errors import ApiError, Unauthorized
from storefront.middleware.context import BearerAuthMiddleware
from storefront.routers import api_public, auth, products, upload, users
from storefront.services.storage import PUBLIC_PREFIX

os.makedirs(settings.LOG_DIR, exist_ok=True)
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.FileHandler(os.path.join(settings.LOG_DIR, "app.log"), encoding="utf-8"),
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("storefront")


app = FastAPI(
    title=settings.APP_NAME,
    middleware=[
        Middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_methods=["*"],
            allow_headers=["Authorization", "Content-Type"],
        ),
        Middleware(BearerAuthMiddleware),
    ],
)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(PUBLIC_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code, headers=headers)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthorized) else None
    return _error_response(exc.status_code, exc.message, headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error_response(400, "Invalid request")
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return _error_response(400, f"{field}: {message}" if field else message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error")


@app.get("/health")
def health():
    return {"ok": True}


app.include_router(auth.router)
app.include_router(products.router)
app.include_router(users.router)
app.include_router(upload.router)
app.include_router(api_public.router, prefix="/api")
