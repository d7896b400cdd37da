"""
Database access for the available-updates report.

Provides a get_db() dependency that opens a per-request, read-only SQLite
connection and closes it after the response is sent.  The database path is
the one create_app() stored on app.state.db_path.
"""

import sqlite3
from collections.abc import Generator
from pathlib import Path

from fastapi import HTTPException, Request

from utils.update_status import status_categories, status_label

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS projects (
    name                TEXT PRIMARY KEY,
    title               TEXT NOT NULL,
    project_type        TEXT NOT NULL DEFAULT 'module',
    installed_version   TEXT,
    recommended_version TEXT,
    status              INTEGER NOT NULL DEFAULT -2
);
"""


def get_db_path(request: Request) -> Path:
    """Return the database path configured on *request*'s app."""
    return request.app.state.db_path


def create_schema(db_path: Path) -> None:
    """Create the report tables in *db_path* if they do not exist."""
    conn = sqlite3.connect(str(db_path))
    try:
        conn.executescript(SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()


def _make_conn(db_path: Path) -> sqlite3.Connection:
    """Open a read-only connection with Row access."""
    uri = f"file:{db_path}?mode=ro"
    conn = sqlite3.connect(uri, uri=True, check_same_thread=False, timeout=10)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA busy_timeout=5000")
    return conn


def get_db(request: Request) -> Generator[sqlite3.Connection, None, None]:
    """FastAPI dependency: yield a SQLite connection, close on exit.

    Raises HTTP 503 with a friendly message if the database file is
    missing, instead of a cryptic SQLite error.
    """
    db_path = get_db_path(request)
    if not db_path.exists():
        raise HTTPException(
            status_code=503,
            detail=f"Database not found at '{db_path}'.",
        )
    conn = _make_conn(db_path)
    try:
        yield conn
    finally:
        conn.close()


def load_projects(conn: sqlite3.Connection) -> list[dict]:
    """Return report rows, core first then by title, with category markers."""
    rows = conn.execute(
        "SELECT name, title, project_type, installed_version, "
        "recommended_version, status FROM projects "
        "ORDER BY CASE project_type WHEN 'core' THEN 0 ELSE 1 END, "
        "title COLLATE NOCASE"
    ).fetchall()
    projects = []
    for r in rows:
        project = dict(r)
        project["status_label"] = status_label(project["status"])
        project["categories"] = list(status_categories(project["status"]))
        projects.append(project)
    return projects
