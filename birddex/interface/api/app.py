"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from birddex.config import Settings
from birddex.interface.api.routes import (
    auth,
    collection,
    comments,
    friends,
    health,
    leaderboard,
    photos,
    profiles,
    quests,
)
from birddex.interface.error import register_error_handlers
from birddex.util.di.container import create_container, setup_di
from birddex.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py does it.

    Args:
        container: DI container; the production container is built when omitted
    """
    settings = Settings()

    # Outbound calls to auth, storage and geocoding
    instrument_httpx()

    app_instance = FastAPI(
        title="BirdDex API",
        description="Backend API for BirdDex - collect bird photos, build your dex, and compete in photo quests",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.state.cookie_name = settings.auth.cookie_name

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profiles.router)
    app_instance.include_router(photos.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(collection.router)
    app_instance.include_router(friends.router)
    app_instance.include_router(quests.router)
    app_instance.include_router(leaderboard.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
