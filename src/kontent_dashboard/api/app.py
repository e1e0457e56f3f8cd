from __future__ import annotations

from fastapi import FastAPI

from kontent_dashboard.api.errors import handle_kontent_error, handle_value_error
from kontent_dashboard.api.lifespan import lifespan
from kontent_dashboard.api.routes.analytics import router as analytics_router
from kontent_dashboard.api.routes.assignments import router as assignments_router
from kontent_dashboard.api.routes.health import router as health_router
from kontent_dashboard.api.routes.items import router as items_router
from kontent_dashboard.api.routes.languages import router as languages_router
from kontent_dashboard.api.routes.root import router as root_router
from kontent_dashboard.api.routes.users import router as users_router
from kontent_dashboard.errors import KontentError


def create_app() -> FastAPI:
    app = FastAPI(
        title="Kontent Dashboard API",
        description="Browse Kontent.ai content and manage content assignments.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(KontentError, handle_kontent_error)
    app.add_exception_handler(ValueError, handle_value_error)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(items_router)
    app.include_router(assignments_router)
    app.include_router(languages_router)
    app.include_router(users_router)
    app.include_router(analytics_router)

    return app
