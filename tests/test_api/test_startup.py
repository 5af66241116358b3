"""Tests for the startup checks in api/main.py."""

import logging

from api.main import uses_default_jwt_secret
from config.settings import Settings


def test_default_jwt_secret_logs_warning(caplog):
    config = Settings(JWT_SECRET=Settings.model_fields["JWT_SECRET"].default)

    with caplog.at_level(logging.WARNING, logger="api.main"):
        assert uses_default_jwt_secret(config) is True

    assert "JWT_SECRET" in caplog.text


def test_custom_jwt_secret_is_quiet(caplog):
    config = Settings(JWT_SECRET="a-real-secret-from-the-environment-0123456789")

    with caplog.at_level(logging.WARNING, logger="api.main"):
        assert uses_default_jwt_secret(config) is False

    assert caplog.records == []
