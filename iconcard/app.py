import logging
import time
from datetime import datetime
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .core.config import Config
from .core.files import get_static_file
from .core.http import Fetcher, HttpFetchError, UrllibFetcher
from .core.middleware import global_exception_handler, log_requests, request_id_for
from .core.text import interpolate, uppercase_first
from .core.validation import validate_card_text, validate_icon_name
from .services.heroicons import IconFetchError, MalformedPathError, get_icon

logger = logging.getLogger(__name__)

CARD_TEMPLATE = "card.svg"


def get_fetcher() -> Fetcher:
    return UrllibFetcher()


def default_title(icon_name: str) -> str:
    """Turn ``arrow-right`` into ``Arrow Right``."""
    return " ".join(uppercase_first(word) for word in icon_name.split("-") if word)


async def load_icon_paths(name: str, fetcher: Fetcher, request_id: str) -> str:
    """Fetch normalized icon paths, mapping failures onto HTTP errors."""
    try:
        return await get_icon(name, fetcher)
    except IconFetchError as e:
        if isinstance(e.cause, HttpFetchError) and e.cause.status == 404:
            logger.warning(f"[{request_id}] Icon not found upstream: {name}")
            raise HTTPException(status_code=404, detail=f"Icon '{name}' not found")
        logger.error(f"[{request_id}] Upstream fetch failed for {name}: {e.cause}")
        raise HTTPException(status_code=502, detail="Failed to fetch icon from upstream")
    except MalformedPathError as e:
        logger.error(f"[{request_id}] Upstream returned malformed SVG for {name}: {e}")
        raise HTTPException(status_code=502, detail="Upstream icon SVG is malformed")


# Initialize FastAPI
app = FastAPI(title="Icon Card API")

# CORS setup
ALLOWED_ORIGINS = Config.allowed_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def _log_requests(request, call_next):
    return await log_requests(request, call_next)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/icons/{name}")
async def icon_paths(name: str, request: Request, fetcher: Fetcher = Depends(get_fetcher)):
    """Return the normalized ``<path>`` elements of a Heroicons outline icon."""
    request_id = request_id_for(request)
    validate_icon_name(name)

    paths = await load_icon_paths(name, fetcher, request_id)
    return {"name": name, "paths": paths}


@app.get("/cards/{name}")
async def icon_card(
    name: str,
    request: Request,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    fetcher: Fetcher = Depends(get_fetcher),
):
    """Render the card template with the icon paths and text interpolated.

    - Validates the icon name and card text
    - Fetches and normalizes the icon paths
    - Fills ``{{icon}}``, ``{{title}}`` and ``{{subtitle}}`` in static/card.svg
    """
    request_id = request_id_for(request)
    validate_icon_name(name)
    validate_card_text(title, subtitle)

    paths = await load_icon_paths(name, fetcher, request_id)

    try:
        template = await get_static_file(CARD_TEMPLATE)
    except FileNotFoundError:
        logger.error(f"[{request_id}] Card template {CARD_TEMPLATE} missing from {Config.STATIC_DIR}")
        raise HTTPException(status_code=404, detail="Card template not found")

    card = interpolate(template, {
        "icon": paths,
        "title": title or default_title(name),
        "subtitle": subtitle,
    })
    return Response(content=card, media_type="image/svg+xml")


@app.get("/health")
async def health_check():
    """Configuration check for the API; does not call the upstream."""
    health_start_time = time.time()

    try:
        Config.validate()
        health_duration = time.time() - health_start_time

        return {
            "status": "healthy",
            "service": "icon-card-api",
            "timestamp": datetime.now().isoformat(),
            "response_time_ms": round(health_duration * 1000, 2)
        }
    except Exception as e:
        health_duration = time.time() - health_start_time
        logger.error(f"Health check failed: {str(e)} - Duration: {health_duration:.1f}s")

        return {
            "status": "unhealthy",
            "service": "icon-card-api",
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
            "response_time_ms": round(health_duration * 1000, 2)
        }


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": "Icon Card API",
        "version": "1.0",
        "endpoints": {
            "icon_paths": "/icons/{name}",
            "icon_card": "/cards/{name}",
            "health": "/health"
        },
        "timestamp": datetime.now().isoformat(),
        "description": "Normalized Heroicons outline paths and gradient icon cards"
    }
