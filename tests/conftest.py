import pytest

from http_swagger.config import config


@pytest.fixture(autouse=True)
def reset_swagger_settings(monkeypatch):
    """Pin the process-wide Swagger settings for each test."""
    monkeypatch.setattr(config.swagger, "default_instance_name", "swagger")
    monkeypatch.setattr(config.swagger, "strict_validation", False)
    yield
