from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketplace import __version__
from marketplace.core.config import Settings, get_settings
from marketplace.core.container import ApplicationContainer
from marketplace.core.logging import configure_logging
from marketplace.interfaces.http import create_api_router
from marketplace.interfaces.http.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    configure_logging(container.settings)
    await container.init_infrastructure()
    yield
    await container.shutdown()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.project_name,
        description="Benefit marketplace: catalog, token wallets and purchases",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = ApplicationContainer.build(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
