"""Core functionality for the Snowflake service.

This package holds everything that does not depend on the web framework:

- **generator**: Seeded, 6-fold symmetric ASCII snowflake generation
- **snowflake_db**: SQLite-backed storage for generated snowflakes
- **config**: Configuration management using Pydantic Settings

Architecture Overview
---------------------
1. **Generation Layer** (generator.py):
   - Pure function ``generate(seed, size, style)``
   - Lehmer / Park-Miller sequence seeded from a string hash
   - Wedge synthesis followed by six rotations onto a character grid

2. **Storage Layer** (snowflake_db.py):
   - Single ``snowflakes`` table (pattern, size, melted flag, timestamp)
   - One SQLite connection per operation

3. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with SNOWFLAKES_ in .env files

Usage Example
-------------
    from snowflakes.core import generate

    print(generate("my-unique-seed", 11, "classic"))
"""

from snowflakes.core.generator import PALETTES, STYLES, InvalidParameterError, generate

__all__ = [
    "generate",
    "InvalidParameterError",
    "PALETTES",
    "STYLES",
]
