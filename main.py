from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from shortlink_app.config import settings
from shortlink_app.logging_config import setup_logging
from shortlink_app.dependencies import get_url_store
from shortlink_app.api.errors import register_exception_handlers
from shortlink_app.api.middleware import AccessLogMiddleware, RequestIDMiddleware
from shortlink_app.api.v1 import urls, redirect

logger = setup_logging(settings.environment, settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup, release the store on shutdown."""
    logger.info(
        "starting shortlink",
        extra={"env": settings.environment, "version": settings.app_version},
    )
    logger.debug("debug messages are enabled")

    store = app.dependency_overrides.get(get_url_store, get_url_store)()
    store.init()

    yield

    logger.info("stopping server")
    store.close()
    logger.info("server stopped")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A URL shortener service built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan,
)

# Last added runs first: the request id is set before the access log reads it
app.add_middleware(AccessLogMiddleware, logger=logger.getChild("access"))
app.add_middleware(RequestIDMiddleware)
register_exception_handlers(app)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(urls.router)
app.include_router(redirect.router)


if __name__ == "__main__":
    logger.info("init server", extra={"address": f"{settings.host}:{settings.port}"})
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_level="info" if settings.environment == "prod" else "debug",
    )
