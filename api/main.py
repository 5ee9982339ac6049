from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cars import router as cars_router
from commutes import router as commutes_router
from core import config
from core.logging_config import setup_logging
from core.store import PostgrestStore, Store, StoreError
from persons import router as persons_router

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request."


def create_app(store: Store | None = None) -> FastAPI:
    """
    Build the API app.

    Pass `store` to use an already-built store (tests). Otherwise the lifespan
    builds a `PostgrestStore` from the environment and closes it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Covers `uvicorn main:app`, which never calls main().
        setup_logging(config.log_level())
        if store is not None:
            app.state.store = store
            yield
            return

        settings = config.load_settings()
        owned = PostgrestStore(
            settings.store_url,
            settings.store_key,
            timeout_s=settings.store_timeout_s,
        )
        app.state.store = owned
        logger.info("store_ready url=%s", settings.store_url)
        try:
            yield
        finally:
            await owned.aclose()
            logger.info("store_closed")

    app = FastAPI(title="carpool api", lifespan=lifespan)
    if store is not None:
        # Available without running the lifespan (ASGI test transports skip it).
        app.state.store = store

    @app.middleware("http")
    async def unhandled_errors(request: Request, call_next):
        # Must stay inside CORSMiddleware: add it before the CORS middleware.
        try:
            return await call_next(request)
        except Exception:
            logger.exception("unhandled_error path=%s", request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error."},
            )

    # The frontend may be served from anywhere.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(cars_router.router, prefix="/api", tags=["cars"])
    app.include_router(persons_router.router, prefix="/api", tags=["persons"])
    app.include_router(commutes_router.router, prefix="/api", tags=["commutes"])

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("store_error path=%s code=%s message=%s", request.url.path, exc.code, exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = _validation_message(exc)
        logger.warning("validation_error path=%s detail=%s", request.url.path, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "carpool api"}

    return app


app = create_app()


def main() -> None:
    setup_logging(config.log_level())
    try:
        settings = config.load_settings()
    except config.ConfigError as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc

    logger.info("server_starting host=%s port=%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
