from __future__ import annotations
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from .core.config import APP_TITLE, APP_VERSION
from .storage.memory import InMemoryStore
from .routers import data as data_router
from .routers import health as health_router

logger = logging.getLogger(__name__)

def create_app(store: Optional[InMemoryStore] = None) -> FastAPI:
    app = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        description="In-memory key/value store: PUT a text value under /data/{key}, GET it back.",
        docs_url="/docs", redoc_url="/redoc", openapi_url="/openapi.json",
    )
    app.state.store = store if store is not None else InMemoryStore()

    @app.middleware("http")
    async def internal_errors(request: Request, call_next):
        # anything a route lets escape ends here, the server keeps serving
        try:
            return await call_next(request)
        except Exception:
            logger.exception("unhandled error on %s %s", request.method, request.url.path)
            return PlainTextResponse("internal server error", status_code=500)

    app.include_router(data_router.router)
    app.include_router(health_router.router)
    return app

app = create_app()
