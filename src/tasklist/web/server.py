from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasklist.app import App
from tasklist.config import Config
from tasklist.errors import UserError
from tasklist.web.error_handlers import general_exception_handler, user_error_handler
from tasklist.web.routers import lists_router, tasks_router, users_router

TOKEN_HEADERS = ["x-access-token", "x-refresh-token"]


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        app.state.config = config
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Tasklist API",
        version="0.1.0",
        summary="Per-user lists and tasks with access/refresh token authentication",
        lifespan=lifespan,
    )

    # Token headers must be readable by browser clients on cross-origin responses
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "HEAD", "OPTIONS", "PUT", "PATCH", "DELETE"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", *TOKEN_HEADERS, "_id"],
        expose_headers=TOKEN_HEADERS,
    )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    app.include_router(users_router)
    app.include_router(lists_router)
    app.include_router(tasks_router)

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app
