from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio import __version__
from folio.core import settings
from folio.core.errors import install_exception_handlers
from folio.news import router as news_router
from folio.profiles import router as profiles_router
from folio.projects import router as projects_router
from folio.publications import router as publications_router
from folio.storage import Storage, storage_from_env
from folio.storage.seed import seed_if_empty

logger = logging.getLogger(__name__)


def create_app(storage: Storage | None = None, *, seed: bool | None = None) -> FastAPI:
    """
    Build the API. Without an explicit `storage` the backend is chosen from
    the environment when the app starts.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = app.state.storage if app.state.storage is not None else storage_from_env()
        await store.open()
        app.state.storage = store
        run_seed = settings.seed_on_startup() if seed is None else seed
        try:
            # Seed before the first request is served.
            if run_seed:
                await seed_if_empty(store)
            logger.info("startup_complete storage=%s seeded=%s", type(store).__name__, run_seed)
            yield
        finally:
            await store.close()

    app = FastAPI(title="scholar-folio", version=__version__, lifespan=lifespan)
    app.state.storage = storage

    # Allow the frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_exception_handlers(app)

    app.include_router(profiles_router.router, tags=["profile"])
    app.include_router(publications_router.router, tags=["publications"])
    app.include_router(projects_router.router, tags=["projects"])
    app.include_router(news_router.router, tags=["news"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
