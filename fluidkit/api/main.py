import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from fluidkit import __version__
from fluidkit.api.deps import get_settings, load_configured_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules on startup (fail-fast)
    try:
        rules = load_configured_rules(settings)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    logger.info(
        "Rules loaded from %s (breakpoints %d-%dpx)",
        settings.rules_path or "defaults",
        rules.breakpoints.min_screen_width,
        rules.breakpoints.max_screen_width,
    )
    yield


app = FastAPI(
    title="Fluid Kit API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from fluidkit.api.routes import fluid  # noqa: E402

app.include_router(fluid.router, prefix="/api/fluid", tags=["Fluid"])
app.include_router(fluid.css_router, prefix="/fluid", tags=["Fluid CSS"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "fluidkit"}
