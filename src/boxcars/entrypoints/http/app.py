from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from boxcars.entrypoints.http.config import cors_origins
from boxcars.entrypoints.http.exception_handlers import register_exception_handlers
from boxcars.entrypoints.http.middleware import security_headers
from boxcars.entrypoints.http.routes.contact import router as contact_router
from boxcars.entrypoints.http.routes.health import router as health_router
from boxcars.entrypoints.http.routes.users import router as users_router
from boxcars.entrypoints.http.routes.vehicles import router as vehicles_router
from boxcars.infra.db.session import dispose_engine
from boxcars.infra.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    dispose_engine()


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="BoxCars API",
        description="""
        Automotive marketplace API: browse listings, manage inventory and
        route buyer inquiries to dealers.

        ## Features
        - Search vehicle listings with filters, sorting and pagination
        - Publish, update and delete vehicles (dealers and admins)
        - Send inquiries about a vehicle and manage them (dealers and admins)
        - Keep a list of favorite vehicles

        ## Authentication
        Protected routes expect `Authorization: Bearer <token>`. Tokens are
        issued by the identity service.

        ## Rate Limiting
        Not enforced by the application; handled at the deployment edge.

        ## Error Handling
        All errors return `{"success": false, "message": ..., "code": ...}`,
        plus an `errors` list for field-level failures.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(security_headers)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(vehicles_router, prefix="/api/vehicles")
    app.include_router(contact_router, prefix="/api/contact")
    app.include_router(users_router, prefix="/api/users")

    return app


app = build_app()
