"""FastAPI application factory for the JWT RSA256 API."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse

from rsajwt.api.deps import Keys
from rsajwt.api.router_jwt import router as jwt_router
from rsajwt.api.router_keys import router as keys_router
from rsajwt.api.schemas import HealthResponse, error_response
from rsajwt.core.logging import configure_logging
from rsajwt.core.settings import AppSettings

HTTP_BAD_REQUEST = 400


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into ``field: message`` pairs."""
    messages = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc)
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(messages) or "Invalid request"


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(_describe_validation_error(exc), HTTP_BAD_REQUEST)


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""
    settings = AppSettings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="JWT RSA256 API",
        version="0.1.0",
    )

    origins = settings.get_cors_origin_list()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "DELETE"],
            allow_headers=["Authorization", "Content-Type"],
        )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(keys_router)
    app.include_router(jwt_router)

    @app.get("/health")
    def health(keys: Keys) -> HealthResponse:
        """Liveness probe that also reports whether keys are on disk."""
        return HealthResponse(keys_present=keys.exists())

    return app
