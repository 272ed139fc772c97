"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from label_lookup import __version__
from label_lookup.config import get_settings
from label_lookup.core.lifespan import lifespan
from label_lookup.core.middleware import setup_middleware
from label_lookup.middleware.error_handlers import register_error_handlers
from label_lookup.routers import health_router, label_lookup_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Label Lookup API",
        description="""
        Resolves pretty URL names to label records.

        ## Lookup
        - `/api/v1/label-lookup?name=basic-science`
        - `/api/v1/label-lookup/basic-science`

        ## Health
        - `/health` - Basic health check
        - `/health/ready` - Readiness probe (Elasticsearch reachable?)
        """,
        version=__version__,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(label_lookup_router.router, prefix="/api/v1/label-lookup", tags=["label-lookup"])

    return app
