"""SQLite connection management for the local catalog."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union


DEFAULT_DB_PATH = Path(__file__).parent.parent.parent.parent / "data" / "catalog.db"


def adapt_datetime(val: datetime) -> str:
    return val.isoformat()


def adapt_decimal(val: Decimal) -> str:
    return str(val)


def convert_datetime(val: bytes) -> datetime:
    return datetime.fromisoformat(val.decode())


def convert_decimal(val: bytes) -> Decimal:
    return Decimal(val.decode())


sqlite3.register_adapter(datetime, adapt_datetime)
sqlite3.register_adapter(Decimal, adapt_decimal)
sqlite3.register_converter("DATETIME", convert_datetime)
sqlite3.register_converter("DECIMAL", convert_decimal)


class SQLiteConnection:
    """Manages SQLite connections with a transaction context manager."""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """Initializes connection.

        Args:
            db_path: Path to database file. Uses default if not specified.
        """
        if db_path:
            self.db_path = Path(db_path)
        else:
            self.db_path = DEFAULT_DB_PATH

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_tables()

    @contextmanager
    def get_connection(self):
        """Context manager for getting a connection with transaction."""
        conn = sqlite3.connect(
            self.db_path,
            detect_types=sqlite3.PARSE_DECLTYPES,
        )
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_tables(self):
        """Initializes the catalog tables."""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS categories (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL CHECK (length(name) > 0),
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS carriers (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL CHECK (length(name) > 0),
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            """
            )

            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS products (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT DEFAULT '',
                    price DECIMAL NOT NULL CHECK (price > 0),
                    category_id INTEGER REFERENCES categories(id),
                    image_url TEXT,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            """
            )

            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_categories_name ON categories(name)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_carriers_name ON carriers(name)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_products_title ON products(title)"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_products_category ON products(category_id)"
            )
