"""FastAPI application for the Rust IR explorer."""

import logging
import shutil
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from . import __version__
from .config import settings
from .routes import compile_router, ir_types_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    logger.info(
        "irview-server using %s run %s rustc (edition %s)",
        settings.rustup_bin,
        settings.toolchain,
        settings.edition,
    )
    if shutil.which(settings.rustup_bin) is None:
        logger.warning("%s not found on PATH; every compile will fail", settings.rustup_bin)
    yield


app = FastAPI(
    title="Rust IR Explorer",
    description="Shows rustc's intermediate representations for a source snippet",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(compile_router, prefix="/api", tags=["compile"])
app.include_router(ir_types_router, prefix="/api", tags=["compile"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "toolchain": shutil.which(settings.rustup_bin) is not None,
    }


# Static frontend catches every path the API does not, so it must be mounted last
if settings.static_dir.is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
else:
    logger.warning("Static directory %s not found; serving API only", settings.static_dir)


def run():
    """Entry point for irview-server command."""
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)


if __name__ == "__main__":
    run()
