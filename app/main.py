import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.responses import debug_detail, error_response, utc_timestamp
from app.api.routes.search import build_search_router
from app.core.config import Settings, load_settings
from app.core.schemas import HealthResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "Scholarship Finder API"
SEARCH_PATH = "/api/search-scholarships"
AVAILABLE_ENDPOINTS = ["/", "/health", SEARCH_PATH]


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the service around an explicit Settings object (read from the environment if omitted)."""
    if settings is None:
        settings = load_settings()
    _configure_logging(settings)

    app = FastAPI(
        title="Scholarship Finder (Scholarship Search Service)",
        description="Finds scholarships for Indian students via a chat-completion API and returns them as structured records",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings

    limiter = Limiter(
        key_func=get_remote_address,
        enabled=settings.rate_limit_enabled,
    )
    app.state.limiter = limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization", "Cache-Control"],
    )

    app.include_router(build_search_router(limiter, settings.rate_limit))

    @app.get("/", tags=["health"])
    def root():
        return {
            "message": f"{SERVICE_NAME} is running!",
            "status": "healthy",
            "timestamp": utc_timestamp(),
            "endpoints": {"health": "/health", "scholarships": SEARCH_PATH},
        }

    @app.get("/health", tags=["health"], response_model=HealthResponse)
    def health():
        return HealthResponse(
            status="OK",
            service=SERVICE_NAME,
            timestamp=utc_timestamp(),
            environment=settings.environment,
            api_key="configured" if settings.api_key_configured else "missing",
        )

    @app.exception_handler(RateLimitExceeded)
    def rate_limit_handler(request: Request, exc: RateLimitExceeded):
        logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
        return error_response(429, "Too many requests, please try again later.")

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Malformed request body on {request.url.path}")
        return error_response(
            400,
            "Invalid request format. Please check your input.",
            debug=debug_detail(settings.is_development, errors=jsonable_encoder(exc.errors())),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return error_response(
                404,
                "Endpoint not found",
                availableEndpoints=AVAILABLE_ENDPOINTS,
                method=request.method,
                path=request.url.path,
            )
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(500, "Internal server error")

    def custom_openapi():
        """Generate OpenAPI schema with custom settings."""
        if app.openapi_schema:
            return app.openapi_schema
        app.openapi_schema = get_openapi(
            title="Scholarship Finder API",
            version="0.1.0",
            description="Scholarship search API with structured, always non-empty results",
            routes=app.routes,
        )
        return app.openapi_schema

    app.openapi = custom_openapi

    logger.info(f"API key configured: {'YES' if settings.api_key_configured else 'NO'}")
    logger.info(f"Environment: {settings.environment}")
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
