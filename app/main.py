"""FastAPI application routes, middleware, and metrics."""

import time
import uuid
from contextlib import asynccontextmanager
from datetime import date
from typing import Optional

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from prometheus_client import Counter, Histogram, start_http_server
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog.contextvars import bind_contextvars, clear_contextvars

from app.config import (
    Settings,
    StaticAssets,
    load_settings,
    load_static_assets,
)
from app.errors import ConfigError, WeatherServiceError
from app.geo.geolocation import client_ip_from_headers, geo_lookup
from app.logging_config import logger
from app.models.location import Location
from app.view.builder import build_view_model
from app.view.renderer import render_weather
from app.weather_service.season import get_season
from app.weather_service.units import resolve_units
from app.weather_service.weather import get_weather_data_from_api

METHOD_NOT_ALLOWED_MESSAGE = "This method is not allowed"
NOT_FOUND_MESSAGE = "The page you requested could not be found"

SERVED_PATHS = {"/", "/bg-image.jpg", "/style.css", "/feather.min.js"}
UNMATCHED_PATH_LABEL = "other"

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "path", "status_code"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "HTTP request duration in seconds", ["path"]
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load configuration and static assets once per process.

    A missing API key raises ConfigError here and stops the startup.
    """
    settings = load_settings()
    app.state.settings = settings
    app.state.assets = load_static_assets(settings.static_dir)
    if settings.metrics_port:
        start_http_server(settings.metrics_port)
        logger.info("METRICS_EXPORTED", port=settings.metrics_port)
    logger.info("STARTUP", static_dir=str(settings.static_dir))
    yield


app = FastAPI(
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)


def metrics_path_label(path: str) -> str:
    return path if path in SERVED_PATHS else UNMATCHED_PATH_LABEL


@app.middleware("http")
async def reject_non_get(request: Request, call_next):
    """Answer every non-GET request with 405 before routing."""
    if request.method != "GET":
        return PlainTextResponse(METHOD_NOT_ALLOWED_MESSAGE, status_code=405)
    return await call_next(request)


@app.middleware("http")
async def request_logging(request: Request, call_next):
    """Log each request with its ID and record Prometheus metrics.

    Metrics are labelled with the served path, or ``"other"`` for anything
    that is not a route, so unknown URLs cannot grow the label set.
    """
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    bind_contextvars(request_id=request_id)
    start = time.perf_counter()
    response = None
    try:
        response = await call_next(request)
        response.headers["x-request-id"] = request_id
        return response
    finally:
        duration_s = time.perf_counter() - start
        duration_ms = round(duration_s * 1000, 2)
        status_code = getattr(response, "status_code", 500)
        logger.info(
            "HTTP_REQUEST",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=duration_ms,
        )
        path_label = metrics_path_label(request.url.path)
        REQUEST_COUNT.labels(
            method=request.method, path=path_label, status_code=status_code
        ).inc()
        REQUEST_LATENCY.labels(path=path_label).observe(duration_s)
        clear_contextvars()


@app.exception_handler(WeatherServiceError)
async def weather_service_error_handler(request: Request, exc: WeatherServiceError):
    """Convert weather service errors into terse plain-text responses.

    Args:
        request: Incoming HTTP request.
        exc: Raised weather service error.

    Returns:
        A plain-text response with the error's public message.
    """
    logger.error(
        "REQUEST_FAILED",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
        status_code=exc.status_code,
    )
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render routing errors as plain text."""
    if exc.status_code == 404:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def get_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise ConfigError("Settings were not loaded at startup")
    return settings


def get_assets(request: Request) -> StaticAssets:
    assets = getattr(request.app.state, "assets", None)
    if assets is None:
        raise ConfigError("Static assets were not loaded at startup")
    return assets


def get_location(request: Request, settings: Settings = Depends(get_settings)) -> Location:
    """Resolve the requesting client's location from its IP address."""
    client_ip = client_ip_from_headers(
        request.headers.get("x-forwarded-for"),
        request.client.host if request.client else None,
    )
    return geo_lookup(client_ip, url=settings.geo_api_url, timeout=settings.geo_timeout_s)


def get_today() -> date:
    return date.today()


@app.get("/", response_class=HTMLResponse)
def weather_view(
    units: Optional[str] = None,
    location: Location = Depends(get_location),
    today: date = Depends(get_today),
    settings: Settings = Depends(get_settings),
):
    """Render the weather page for the client's location.

    Args:
        units: Optional units token from the query string, forwarded to
            the weather API.

    Returns:
        The rendered HTML page.
    """
    units = resolve_units(units)
    snapshot = get_weather_data_from_api(
        location,
        units,
        api_key=settings.api_key,
        url=settings.weather_api_url,
        timeout=settings.weather_timeout_s,
    )
    context = build_view_model(snapshot, location, today, units)
    return HTMLResponse(render_weather(context))


@app.get("/bg-image.jpg")
def background_image(
    location: Location = Depends(get_location),
    today: date = Depends(get_today),
    assets: StaticAssets = Depends(get_assets),
):
    """Serve the background image for the client's current season."""
    season = get_season(location.latitude, today.month)
    logger.info("BACKGROUND_SEASON", season=season.value, lat=location.latitude)
    return Response(assets.background_for(season), media_type="image/jpeg")


@app.get("/style.css")
def stylesheet(assets: StaticAssets = Depends(get_assets)):
    return Response(assets.style_css, media_type="text/css")


@app.get("/feather.min.js")
def feather_script(assets: StaticAssets = Depends(get_assets)):
    return Response(assets.feather_js, media_type="text/javascript")
