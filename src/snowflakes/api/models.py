"""Pydantic request and response models for the Snowflake API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for request parsing, serialisation, and OpenAPI documentation
generation.

Range and enumeration checks on :class:`CreateSnowflakeRequest` are done in
the route handler rather than here, so that out-of-range values produce a
``400`` response instead of FastAPI's generic ``422``.

Models
------
Snowflake
    A stored snowflake as returned by the list and get endpoints.
CreateSnowflakeRequest
    Payload for ``POST /api/snowflakes`` — every field is optional.
CreateSnowflakeResponse
    Result of ``POST /api/snowflakes``.
SuccessResponse
    Result of the melt and delete endpoints.
StatsResponse
    Result of ``GET /api/stats``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Snowflake(BaseModel):
    """A stored snowflake.

    Attributes:
        id: Row identifier.
        pattern: Rendered ASCII pattern, rows separated by newlines.
        size: Grid side length the pattern was rendered at.
        melted: ``1`` once the snowflake has been melted, else ``0``.
        createdAt: Creation time in unix seconds.
    """

    id: int = Field(..., examples=[1])
    pattern: str = Field(..., examples=["  *  \n * * \n*   *\n * * \n  *  "])
    size: int = Field(..., examples=[5])
    melted: int = Field(..., examples=[0])
    createdAt: int = Field(..., examples=[1734123456])


class CreateSnowflakeRequest(BaseModel):
    """Request body for the ``POST /api/snowflakes`` endpoint.

    Attributes:
        size: Grid side length (1–20).  Even values are bumped to the next
            odd value.  ``None`` means the server picks a random size.
        seed: Seed string.  ``None`` means the server derives one from the
            current time.
        style: Glyph palette name.  ``None`` means the server picks one at
            random.
    """

    size: int | None = Field(
        default=None,
        description="Grid size (1–20). Even sizes are rounded up to odd.",
        examples=[11],
    )
    seed: str | None = Field(
        default=None,
        description="Seed string. None = server derives one from the clock.",
        examples=["my-unique-seed"],
    )
    style: str | None = Field(
        default=None,
        description="Palette: 'classic', 'dense', 'minimal' or 'mixed'.",
        examples=["classic"],
    )


class CreateSnowflakeResponse(BaseModel):
    """Response body for ``POST /api/snowflakes``.

    The seed and style are echoed back so that a snowflake created with
    server-side defaults can be regenerated later.
    """

    id: int = Field(..., examples=[1])
    seed: str = Field(..., examples=["my-unique-seed"])
    style: str = Field(..., examples=["classic"])


class SuccessResponse(BaseModel):
    """Response body for melt and delete operations."""

    ok: bool = Field(default=True, examples=[True])


class StatsResponse(BaseModel):
    """Response body for ``GET /api/stats``."""

    total: int = Field(..., description="Number of stored snowflakes.")
    melted: int = Field(..., description="Number of melted snowflakes.")
    frozen: int = Field(..., description="Number of snowflakes not yet melted.")
