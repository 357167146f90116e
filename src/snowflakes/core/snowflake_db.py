"""SQLite storage for generated snowflakes."""

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

_COLUMNS = "id, pattern, size, melted, created_at"


class SnowflakeDB:
    """Manage the ``snowflakes`` table using SQLite.

    Each method opens its own connection, so a single instance can be shared
    across request handlers.  Rows are returned as plain dictionaries using
    the API field names (``createdAt`` rather than ``created_at``).
    """

    def __init__(self, db_path: Path):
        """Initialize the snowflake database.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize_db()
        logger.info(f"Initialized snowflake database at {self.db_path}")

    def _initialize_db(self) -> None:
        """Create database schema if it doesn't exist."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS snowflakes (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    pattern TEXT NOT NULL,
                    size INTEGER NOT NULL,
                    melted INTEGER NOT NULL DEFAULT 0,
                    created_at INTEGER NOT NULL
                )
                """)
            conn.commit()

    @staticmethod
    def _row_to_dict(row: tuple) -> dict:
        return {
            "id": row[0],
            "pattern": row[1],
            "size": row[2],
            "melted": row[3],
            "createdAt": row[4],
        }

    def create_snowflake(self, pattern: str, size: int, created_at: int) -> int:
        """Insert a new, unmelted snowflake.

        Args:
            pattern: Rendered pattern text
            size: Grid size the pattern was rendered at
            created_at: Creation time in unix seconds

        Returns:
            The id assigned to the new row
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO snowflakes (pattern, size, melted, created_at)
                VALUES (?, ?, 0, ?)
                """,
                (pattern, size, created_at),
            )
            conn.commit()
            snowflake_id = cursor.lastrowid

        logger.info(f"Created snowflake {snowflake_id} (size {size})")
        return snowflake_id

    def list_snowflakes(self) -> list[dict]:
        """Get all snowflakes.

        Returns:
            List of snowflake dictionaries, newest id first
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(f"SELECT {_COLUMNS} FROM snowflakes ORDER BY id DESC")
            return [self._row_to_dict(row) for row in cursor.fetchall()]

    def get_snowflake(self, snowflake_id: int) -> dict | None:
        """Get a single snowflake by id.

        Returns:
            The snowflake dictionary, or None if no row has that id
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                f"SELECT {_COLUMNS} FROM snowflakes WHERE id = ?",
                (snowflake_id,),
            )
            row = cursor.fetchone()
            return self._row_to_dict(row) if row else None

    def melt_snowflake(self, snowflake_id: int) -> bool:
        """Mark a snowflake as melted.

        Melting an already melted snowflake still counts as a match.

        Returns:
            True if a row matched, False if no row has that id
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE snowflakes SET melted = 1 WHERE id = ?",
                (snowflake_id,),
            )
            conn.commit()
            was_updated = cursor.rowcount > 0

        if was_updated:
            logger.info(f"Melted snowflake {snowflake_id}")
        else:
            logger.debug(f"Cannot melt missing snowflake {snowflake_id}")
        return was_updated

    def delete_snowflake(self, snowflake_id: int) -> bool:
        """Permanently remove a snowflake.

        Returns:
            True if a row was deleted, False if no row has that id
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM snowflakes WHERE id = ?", (snowflake_id,))
            conn.commit()
            was_deleted = cursor.rowcount > 0

        if was_deleted:
            logger.info(f"Deleted snowflake {snowflake_id}")
        else:
            logger.debug(f"Cannot delete missing snowflake {snowflake_id}")
        return was_deleted

    def get_counts(self) -> dict[str, int]:
        """Count stored snowflakes.

        Returns:
            Dictionary with ``total``, ``melted`` and ``frozen`` counts
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*), COALESCE(SUM(melted), 0) FROM snowflakes")
            total, melted = cursor.fetchone()

        return {"total": total, "melted": melted, "frozen": total - melted}
