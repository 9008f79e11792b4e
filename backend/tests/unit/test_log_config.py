"""Unit tests for logging setup and database URL handling."""

import logging

import pytest

from host_manager.config import Settings
from host_manager.infrastructure.database.session import to_async_url
from host_manager.infrastructure.logging.log_config import parse_level, setup_logging


def test_setup_logging_applies_category_levels():
    settings = Settings(
        _env_file=None,
        log_level="INFO",
        log_level_sql="ERROR",
        log_level_services="DEBUG",
    )
    applied = setup_logging(settings)

    assert applied["sqlalchemy.engine"] == logging.ERROR
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("host_manager.application.services").level == logging.DEBUG


@pytest.mark.parametrize("raw,expected", [
    ("debug", logging.DEBUG),
    (" WARNING ", logging.WARNING),
    ("loud", logging.INFO),
])
def test_parse_level(raw, expected):
    assert parse_level(raw) == expected


@pytest.mark.parametrize("url,expected", [
    ("sqlite:///./host_manager.db", "sqlite+aiosqlite:///./host_manager.db"),
    ("postgresql://u:p@db/hosting", "postgresql+asyncpg://u:p@db/hosting"),
    ("postgres://u:p@db/hosting", "postgresql+asyncpg://u:p@db/hosting"),
    ("sqlite+aiosqlite:///x.db", "sqlite+aiosqlite:///x.db"),
])
def test_to_async_url(url, expected):
    assert to_async_url(url) == expected
