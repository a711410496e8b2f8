from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from economy import __version__
from economy.core.config import Settings, get_settings
from economy.core.container import ApplicationContainer
from economy.core.logging import configure_logging
from economy.interfaces.http.errors import register_exception_handlers
from economy.interfaces.http.routers import create_api_router
from economy.interfaces.ws.router import router as websocket_router


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ApplicationContainer] = None,
) -> FastAPI:
    settings = settings or (container.settings if container else get_settings())
    container = container or ApplicationContainer.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        await container.startup()
        yield
        await container.shutdown()

    app = FastAPI(
        title=settings.project_name,
        description="Virtual currency, store, inventory and gift escrow service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(websocket_router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
