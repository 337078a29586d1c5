from __future__ import annotations

import pytest

from app import create_app
from config import TestingConfig
from utils.db import EMPLOYEE_COLLECTION, OFFICE_COLLECTION


def test_health(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "OK", "message": "API is running"}


def test_unknown_route_is_json_404(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}


def test_cors_allows_any_origin(client):
    resp = client.get("/", headers={"Origin": "http://dashboard.example.com"})

    # flask-cors 6 echoes the origin, earlier releases answer "*"
    assert resp.headers["Access-Control-Allow-Origin"] in ("*", "http://dashboard.example.com")


def test_upload_folder_is_created(app, upload_dir):
    assert upload_dir.is_dir()


def test_seed_directory_command(app, db):
    runner = app.test_cli_runner()

    result = runner.invoke(
        args=["seed-directory", "--employee", "Alice", "--employee", "Bob", "--office", "HQ:23.02:72.57"]
    )

    assert result.exit_code == 0, result.output
    assert "added 2 employee(s) and 1 office(s)" in result.output
    assert [d["name"] for d in db.docs(EMPLOYEE_COLLECTION)] == ["Alice", "Bob"]
    (office,) = db.docs(OFFICE_COLLECTION)
    assert (office["name"], office["latitude"], office["longitude"]) == ("HQ", 23.02, 72.57)


def test_seed_directory_rejects_bad_office(app):
    result = app.test_cli_runner().invoke(args=["seed-directory", "--office", "HQ-only"])

    assert result.exit_code != 0
    assert "name:lat:lng" in result.output


def test_prune_uploads_command(app, upload_dir):
    (upload_dir / "1-1.jpg").write_bytes(b"x")
    runner = app.test_cli_runner()

    disabled = runner.invoke(args=["prune-uploads"])
    assert "Retention disabled" in disabled.output

    result = runner.invoke(args=["prune-uploads", "--days", "30"])
    assert result.exit_code == 0
    assert "removed 0 selfie(s)" in result.output
    assert (upload_dir / "1-1.jpg").exists()


@pytest.mark.parametrize("spec", ["HQ:abc:xyz", "HQ:nan:72.57", "HQ:23.02:inf"])
def test_seed_directory_rejects_non_numeric_coordinates(app, db, spec):
    result = app.test_cli_runner().invoke(args=["seed-directory", "--office", spec])

    assert result.exit_code != 0
    assert db.docs(OFFICE_COLLECTION) == []


def test_uri_without_database_falls_back_to_default_db(upload_dir):
    class _Config(TestingConfig):
        MONGO_URI = "mongodb://localhost:27017/"
        UPLOAD_FOLDER = str(upload_dir)

    app = create_app(_Config)

    assert app.extensions["attendance_service"].db.name == "test"
    assert app.extensions["directory_service"].db.name == "test"


def test_uri_database_name_is_used(upload_dir):
    class _Config(TestingConfig):
        UPLOAD_FOLDER = str(upload_dir)

    app = create_app(_Config)

    assert app.extensions["attendance_service"].db.name == "attendance_test"
