"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oxytalk.config import Settings
from oxytalk.domain.service import MessageRouter
from oxytalk.interface.api.routes import chats, contacts, health, identities, invites
from oxytalk.interface.error import register_error_handlers
from oxytalk.interface.ws import gateway
from oxytalk.util.di.container import create_container, setup_di
from oxytalk.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Let queued message appends land before the process exits."""
    yield
    container: AsyncContainer = app.state.dishka_container
    message_router = await container.get(MessageRouter)
    await message_router.flush()
    await container.close()


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to use; built from `settings` by default
        settings: Settings to use instead of reading the environment
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="OxyTalk Core",
        description="Contact-gated 1:1 messaging: invites, contacts, presence and realtime chat",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container(settings))

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(identities.router)
    app_instance.include_router(contacts.router)
    app_instance.include_router(invites.router)
    app_instance.include_router(chats.router)
    app_instance.include_router(gateway.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
