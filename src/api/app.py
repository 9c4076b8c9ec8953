from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel
from src.api.utils.jwt import TokenIssuer
from src.app.services.password_hasher import PasswordHasher
from .error import ClientError, ServerError
from .middleware import log_requests
import logging

logger = logging.getLogger(__name__)

# Request locations that carry no meaning for the client
_LOCATION_PREFIXES = ("body", "query", "path", "header")


async def handle_client_error(request: Request, exc: ClientError):
    content = {
        "success": False,
        "code": exc.base_error.code,
        "message": exc.base_error.message,
    }
    if exc.errors:
        content["errors"] = exc.errors
    logger.warning(f"Client error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} {exc.base_error.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "code": exc.base_error.code,
            "message": "Internal server error",
        },
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = []
    for issue in exc.errors():
        loc = [str(part) for part in issue.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        errors.append({"field": ".".join(loc), "message": issue.get("msg", "Invalid value")})
    logger.warning(f"Validation error on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "code": "VALIDATION_ERROR",
            "message": "Validation failed",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "code": "INTERNAL_ERROR",
            "message": "Internal server error",
        },
    )


def create_app(ApplicationConfig) -> FastAPI:
    # Fails fast on a missing or placeholder signing secret
    token_issuer = TokenIssuer(
        ApplicationConfig.JWT_SECRET,
        lifetime=timedelta(days=ApplicationConfig.JWT_EXPIRES_DAYS),
    )
    password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.DB_AUTO_CREATE:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        logger.info(f"Account API ready under prefix {ApplicationConfig.API_PREFIX!r}")
        yield

    app = FastAPI(title="Account API", version="0.1.0", lifespan=lifespan)
    app.state.token_issuer = token_issuer
    app.state.password_hasher = password_hasher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.middleware("http")(log_requests)

    from src.api.routes import audit, auth, health_check, user

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health_check.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(user.router, prefix=prefix, tags=["User"])
    app.include_router(audit.router, prefix=prefix, tags=["Login Activity"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
