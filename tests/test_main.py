# tests/test_main.py
import pytest

from product_api import main as main_module
from product_api.config import get_settings


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_main_runs_uvicorn_with_configured_address(monkeypatch, fresh_settings):
    calls = []
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setattr(main_module.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main_module.main()

    assert len(calls) == 1
    app, kwargs = calls[0]
    assert app is main_module.app
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 8123


def test_main_defaults_to_port_3000(monkeypatch, fresh_settings):
    calls = []
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setattr(main_module.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

    main_module.main()

    assert calls[0]["port"] == 3000
