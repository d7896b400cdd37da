"""
Tests for api/app.py: create_app() factory

Verifies the FastAPI app is created with correct configuration, routers are
registered, middleware headers are set, and the html_attributes filter.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient

from api.app import create_app, html_attributes
from api.database import create_schema
from api.forms.builder import FormBuilder


class TestCreateApp:
    def test_creates_fastapi_instance(self, report_db):
        app = create_app(db_path=report_db)
        assert app.title == "Update Status API"
        assert app.version == "1.0.0"

    def test_registers_routes(self, report_db):
        app = create_app(db_path=report_db)
        assert app.url_path_for("health") == "/health"
        assert app.url_path_for("update_status_report") == "/admin/reports/updates"
        assert app.url_path_for("update_status_submit") == "/admin/reports/updates"
        assert app.url_path_for("build_form", form_id="x") == "/api/v1/forms/x"
        assert app.url_path_for("submit_form", form_id="x") == "/api/v1/forms/x"
        assert app.url_path_for("list_projects") == "/api/v1/update-status"

    def test_state(self, report_db):
        app = create_app(db_path=report_db)
        assert app.state.db_path == report_db
        assert isinstance(app.state.form_builder, FormBuilder)
        assert app.state.static_prefix == "/static"

    def test_apps_do_not_share_database(self, report_db, tmp_path):
        empty = tmp_path / "empty.sqlite"
        create_schema(empty)
        other = create_app(db_path=empty)
        app = create_app(db_path=report_db)
        assert other.state.db_path != app.state.db_path
        with TestClient(other) as other_client, TestClient(app) as client:
            assert other_client.get("/api/v1/update-status").json() == []
            assert len(client.get("/api/v1/update-status").json()) == 6
            assert other_client.get("/api/v1/update-status").json() == []


class TestMiddleware:
    def test_request_id_header(self, app_client):
        resp = app_client.get("/health")
        assert len(resp.headers["X-Request-ID"]) == 8

    def test_security_headers(self, app_client):
        resp = app_client.get("/admin/reports/updates")
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert "default-src 'self'" in resp.headers["Content-Security-Policy"]


class TestHtmlAttributes:
    def test_class_list_joined(self):
        assert html_attributes({"class": ["a", "b"]}) == 'class="a b"'

    def test_values_escaped(self):
        assert html_attributes({"data-x": '"<y>'}) == 'data-x="&#34;&lt;y&gt;"'

    def test_boolean_and_none(self):
        out = html_attributes({"hidden": True, "disabled": False, "title": None})
        assert out == "hidden"

    def test_preserves_order(self):
        out = html_attributes({"class": ["t"], "data-table": "#update-status", "autocomplete": "off"})
        assert out == 'class="t" data-table="#update-status" autocomplete="off"'
