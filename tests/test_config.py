"""
Tests for settings and small domain types.
"""

import pytest

from ecommerce_gateway.config import Settings
from ecommerce_gateway.entities import PageWindow, Role


def test_backend_urls():
    settings = Settings(
        catalog_service_host="catalog",
        catalog_service_port=9100,
        order_service_host="orders",
        order_service_port=9200,
        auth_service_host="auth",
        auth_service_port=9300,
    )
    assert settings.catalog_service_url == "http://catalog:9100"
    assert settings.order_service_url == "http://orders:9200"
    assert settings.auth_service_url == "http://auth:9300"


@pytest.mark.parametrize(
    "overrides",
    [
        {"auth_service_port": 0},
        {"api_port": 70000},
        {"rpc_timeout": 0},
        {"api_prefix": "v1"},
    ],
)
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)


def test_page_window_defaults():
    window = PageWindow()
    assert (window.offset, window.limit, window.search) == (0, 10, "")


def test_page_window_rejects_negative_values():
    with pytest.raises(ValueError):
        PageWindow(offset=-1)
    with pytest.raises(ValueError):
        PageWindow(limit=-5)


def test_role_parse():
    assert Role.parse("admin") is Role.ADMIN
    assert Role.parse("user") is Role.USER
    assert Role.parse("guest") is None
    assert Role.parse(None) is None
