"""Snowflake API — FastAPI Application.

This module is the single entry point for the web service.  It defines the
FastAPI ``app`` instance, all REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
- **Configuration** comes from :data:`~snowflakes.core.config.config`
  (``SNOWFLAKES_*`` environment variables).
- **Pattern generation** is delegated to
  :func:`~snowflakes.core.generator.generate`, a pure function.
- **Persistence** uses :class:`~snowflakes.core.snowflake_db.SnowflakeDB`, a
  single SQLite table, created on startup and stored on ``app.state``.
- **API documentation** is generated by FastAPI from the Pydantic models in
  :mod:`snowflakes.api.models` and served at ``/docs``.

Endpoints
---------
========  ================================  ==================================
Method    Path                              Purpose
========  ================================  ==================================
GET       ``/``                             Redirect to the Swagger UI
GET       ``/api/snowflakes``               List all snowflakes (newest first)
POST      ``/api/snowflakes``               Generate and store a snowflake
GET       ``/api/snowflakes/{id}``          Single snowflake
GET       ``/api/snowflakes/{id}/render``   Pattern as plain text
PATCH     ``/api/snowflakes/{id}/melt``     Mark a snowflake as melted
DELETE    ``/api/snowflakes/{id}``          Delete a snowflake
GET       ``/api/stats``                    Snowflake counts
========  ================================  ==================================

Usage
-----
CLI (installed entry point)::

    snowflakes

Direct invocation::

    python -m snowflakes.api.main
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse, RedirectResponse

from snowflakes import __version__
from snowflakes.api.models import (
    CreateSnowflakeRequest,
    CreateSnowflakeResponse,
    Snowflake,
    StatsResponse,
    SuccessResponse,
)
from snowflakes.core.config import config
from snowflakes.core.generator import STYLES, InvalidParameterError, generate
from snowflakes.core.snowflake_db import SnowflakeDB

logger = logging.getLogger(__name__)

TAG = "Snowflakes"

# ---------------------------------------------------------------------------
# Application lifecycle — database setup.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the snowflake store on startup.

    The schema is created if missing.  Nothing needs releasing on shutdown
    because every store operation uses its own connection.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.snowflake_db = SnowflakeDB(config.db_path)
    logger.info("Snowflake store ready.")

    yield


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Snowflake API",
    description="A festive API for generating and managing procedural ASCII snowflakes ❄️",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": TAG,
            "description": "Operations for creating, viewing, and managing snowflakes",
        }
    ],
)


# ---------------------------------------------------------------------------
# Request helpers.
# ---------------------------------------------------------------------------


def _parse_id(raw_id: str) -> int | None:
    """Parse a path id, returning ``None`` unless it is a SQLite-sized integer."""
    try:
        value = int(raw_id)
    except ValueError:
        return None
    if not -(2**63) <= value < 2**63:
        return None
    return value


def _require_id(raw_id: str) -> int:
    """Parse a path id or raise a 400 ``HTTPException``."""
    snowflake_id = _parse_id(raw_id)
    if snowflake_id is None:
        raise HTTPException(status_code=400, detail="bad id")
    return snowflake_id


def _db() -> SnowflakeDB:
    return app.state.snowflake_db


def _resolve_create_params(req: CreateSnowflakeRequest) -> tuple[int, str, str]:
    """Validate a create request and fill in server-side defaults.

    Missing (or empty) fields get defaults: a random size within the
    configured range, a random style, and a seed derived from the clock.
    Even sizes are bumped to the next odd value so that the flake has a
    true center cell.

    Args:
        req: The parsed create request.

    Returns:
        Tuple of ``(size, seed, style)`` ready for :func:`generate`.

    Raises:
        HTTPException: 400 for an out-of-range size or unknown style.
    """
    if req.size is not None and not 1 <= req.size <= config.max_size:
        raise HTTPException(
            status_code=400,
            detail=f"size must be between 1 and {config.max_size}",
        )
    if req.style and req.style not in STYLES:
        raise HTTPException(
            status_code=400,
            detail=f"style must be one of: {', '.join(STYLES)}",
        )

    size = req.size or random.randint(config.random_size_min, config.random_size_max)
    if size % 2 == 0:
        size += 1

    seed = req.seed or f"snowflake-{int(time.time() * 1000)}-{random.random()}"
    style = req.style or random.choice(STYLES)

    return size, seed, style


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    """Redirect the bare root to the interactive API documentation."""
    return RedirectResponse(url="/docs")


@app.get(
    "/api/snowflakes",
    response_model=list[Snowflake],
    tags=[TAG],
    summary="List all snowflakes",
)
async def list_snowflakes() -> list[dict]:
    """Return every stored snowflake ordered by id, newest first."""
    return _db().list_snowflakes()


@app.post(
    "/api/snowflakes",
    response_model=CreateSnowflakeResponse,
    status_code=201,
    tags=[TAG],
    summary="Create a new snowflake",
    responses={400: {"description": "Invalid parameters"}},
)
async def create_snowflake(req: CreateSnowflakeRequest) -> dict:
    """Generate a new procedural snowflake and store it.

    This endpoint:

    1. Validates the optional size and style.
    2. Fills in defaults for anything omitted.
    3. Renders the pattern with :func:`generate`.
    4. Persists the pattern with the normalized size.

    Args:
        req: Validated :class:`CreateSnowflakeRequest` payload.

    Returns:
        Dictionary with the new ``id`` and the ``seed`` and ``style`` used.

    Raises:
        HTTPException: 400 for invalid parameters.
    """
    size, seed, style = _resolve_create_params(req)

    try:
        pattern = generate(seed, size, style)
    except InvalidParameterError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    snowflake_id = _db().create_snowflake(pattern, size, int(time.time()))
    return {"id": snowflake_id, "seed": seed, "style": style}


@app.get(
    "/api/snowflakes/{snowflake_id}",
    response_model=Snowflake,
    tags=[TAG],
    summary="Get a snowflake by ID",
    responses={400: {"description": "Invalid ID"}, 404: {"description": "Snowflake not found"}},
)
async def get_snowflake(snowflake_id: str) -> dict:
    """Return a single snowflake.

    Raises:
        HTTPException: 400 if the id is not an integer, 404 if no snowflake
            has that id.
    """
    snowflake = _db().get_snowflake(_require_id(snowflake_id))
    if snowflake is None:
        raise HTTPException(status_code=404, detail="not found")
    return snowflake


@app.get(
    "/api/snowflakes/{snowflake_id}/render",
    response_class=PlainTextResponse,
    tags=[TAG],
    summary="Render a snowflake as ASCII art",
    responses={400: {"description": "Invalid ID"}, 404: {"description": "Snowflake not found"}},
)
async def render_snowflake(snowflake_id: str) -> PlainTextResponse:
    """Return the stored pattern verbatim as ``text/plain``.

    Errors are reported as plain text too, so that the endpoint can be used
    directly from a terminal.
    """
    parsed_id = _parse_id(snowflake_id)
    if parsed_id is None:
        return PlainTextResponse("Invalid snowflake ID", status_code=400)

    snowflake = _db().get_snowflake(parsed_id)
    if snowflake is None:
        return PlainTextResponse("Snowflake not found", status_code=404)

    return PlainTextResponse(snowflake["pattern"])


@app.patch(
    "/api/snowflakes/{snowflake_id}/melt",
    response_model=SuccessResponse,
    tags=[TAG],
    summary="Melt a snowflake",
    responses={400: {"description": "Invalid ID"}, 404: {"description": "Snowflake not found"}},
)
async def melt_snowflake(snowflake_id: str) -> dict:
    """Mark a snowflake as melted.

    Raises:
        HTTPException: 400 for a bad id, 404 if no snowflake has that id.
    """
    if not _db().melt_snowflake(_require_id(snowflake_id)):
        raise HTTPException(status_code=404, detail="not found")
    return {"ok": True}


@app.delete(
    "/api/snowflakes/{snowflake_id}",
    response_model=SuccessResponse,
    tags=[TAG],
    summary="Delete a snowflake",
    responses={400: {"description": "Invalid ID"}, 404: {"description": "Snowflake not found"}},
)
async def delete_snowflake(snowflake_id: str) -> dict:
    """Permanently remove a snowflake.

    Raises:
        HTTPException: 400 for a bad id, 404 if no snowflake has that id.
    """
    if not _db().delete_snowflake(_require_id(snowflake_id)):
        raise HTTPException(status_code=404, detail="not found")
    return {"ok": True}


@app.get("/api/stats", response_model=StatsResponse, tags=[TAG], summary="Snowflake counts")
async def get_stats() -> dict:
    """Return total, melted, and still-frozen snowflake counts."""
    return _db().get_counts()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port, and log level from
    :data:`~snowflakes.core.config.config` (``SNOWFLAKES_SERVER_HOST``,
    ``SNOWFLAKES_SERVER_PORT``, ``SNOWFLAKES_LOG_LEVEL``).  Defaults to
    ``0.0.0.0:3000``.

    This function is registered as the ``snowflakes`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        "snowflakes.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
