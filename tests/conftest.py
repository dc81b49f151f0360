import logging
import sqlite3

import pytest

from sql_ascii_table.sources import RowsResultSource


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls so handlers never outlive a test's streams."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def make_source():
    """Builds an in-memory result source from labels and rows."""
    def _make(columns, rows):
        return RowsResultSource(columns, rows)
    return _make


@pytest.fixture()
def sqlite_db_path(tmp_path):
    db_path = tmp_path / "notes.db"
    conn = sqlite3.connect(db_path)
    try:
        conn.execute(
            "CREATE TABLE notes (id INTEGER PRIMARY KEY, title TEXT, body TEXT, amount REAL)"
        )
        conn.executemany(
            "INSERT INTO notes (title, body, amount) VALUES (?, ?, ?)",
            [
                ("short", "ok", 1234567.5),
                ("multi", "line1\nline2\nline3", None),
                ("wide", "hello world foo bar", 42),
            ],
        )
        conn.commit()
    finally:
        conn.close()
    return db_path
