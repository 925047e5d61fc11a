"""Test application wiring, configuration and logging setup."""
import pytest
from fastapi.testclient import TestClient

from scheduler_extender import __version__
from scheduler_extender.core.config import Settings
from scheduler_extender.core.logging_config import resolve_log_level, setup_logging
from scheduler_extender.main import create_app

from conftest import extender_args, make_node, make_pod


def test_version_route_returns_build_identifier(client):
    response = client.get("/version")
    assert response.status_code == 200
    assert response.text == "test-build"


def test_default_version_is_package_version():
    assert Settings().APP_VERSION == __version__


def test_health_route(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_custom_route_prefix():
    client = TestClient(create_app(Settings(API_PREFIX="/extender")))
    body = extender_args(make_pod(), [make_node("a")])
    assert client.post("/extender/prioritize", json=body).status_code == 200
    assert client.post("/scheduler/prioritize", json=body).status_code == 404


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("SCARCE_RESOURCE", "example.com/fpga")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.SCARCE_RESOURCE == "example.com/fpga"
    assert settings.LOG_LEVEL == "debug"


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("SCARCE_RESOURCE", raising=False)
    monkeypatch.delenv("MAX_PRIORITY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.SCARCE_RESOURCE == "intel.com/foo"
    assert settings.MAX_PRIORITY == 10
    assert settings.API_PREFIX == "/scheduler"


@pytest.mark.parametrize("value,expected", [
    ("trace", "TRACE"),
    ("DEBUG", "DEBUG"),
    ("Info", "INFO"),
    ("warning", "WARNING"),
    ("ERROR", "ERROR"),
    ("alert", "CRITICAL"),
])
def test_resolve_log_level(value, expected):
    assert resolve_log_level(value) == expected


@pytest.mark.parametrize("value", ["", "verbose", None])
def test_unrecognized_log_level_falls_back_to_info(value):
    assert resolve_log_level(value) == "INFO"


def test_setup_logging_returns_effective_level():
    assert setup_logging("nonsense") == "INFO"
    assert setup_logging("error") == "ERROR"


def test_unexpected_errors_become_500_json():
    app = create_app(Settings())

    @app.get("/explode")
    async def explode():
        raise RuntimeError("kaboom")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/explode")
    assert response.status_code == 500
    assert response.json()["detail"] == "kaboom"
    assert client.get("/health").status_code == 200
