"""Snowflake API - procedural ASCII snowflakes over a small REST service."""

__version__ = "1.0.0"

from snowflakes.core.generator import STYLES, InvalidParameterError, generate

__all__ = [
    "generate",
    "InvalidParameterError",
    "STYLES",
]
