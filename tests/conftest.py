"""
Pytest fixtures for the update status report tests.

Provides a temporary SQLite report database seeded with one project per
interesting release status, and a TestClient bound to an app that uses it.
"""

import sqlite3
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient  # noqa: E402

from api.app import create_app  # noqa: E402
from api.database import create_schema  # noqa: E402
from utils import update_status as us  # noqa: E402

SAMPLE_PROJECTS = [
    ("drupal", "Drupal core", "core", "10.2.3", "10.2.5", us.NOT_SECURE),
    ("node", "Node", "module", "1.0.0", None, us.CURRENT),
    ("pathauto", "Pathauto", "module", "8.x-1.11", "8.x-1.12", us.NOT_CURRENT),
    ("old_widget", "Old Widget", "module", "1.0.0", None, us.NOT_SUPPORTED),
    ("bad_release", "Bad Release", "module", "2.0.0", "2.0.1", us.REVOKED),
    ("olivero", "Olivero", "theme", "10.2.3", None, us.UNKNOWN),
]


def _seed(db_path: Path) -> Path:
    create_schema(db_path)
    conn = sqlite3.connect(str(db_path))
    conn.executemany(
        "INSERT INTO projects (name, title, project_type, installed_version, "
        "recommended_version, status) VALUES (?, ?, ?, ?, ?, ?)",
        SAMPLE_PROJECTS,
    )
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture()
def report_db(tmp_path):
    """A seeded report database in a per-test temp directory."""
    return _seed(tmp_path / "update_status.sqlite")


@pytest.fixture(scope="module")
def app_client(tmp_path_factory):
    """TestClient for an app backed by a seeded report database."""
    tmp = tmp_path_factory.mktemp("update_status")
    app = create_app(db_path=_seed(tmp / "update_status.sqlite"))
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def empty_client(tmp_path):
    """TestClient for an app whose database file does not exist."""
    app = create_app(db_path=tmp_path / "missing.sqlite")
    return TestClient(app, raise_server_exceptions=False)
