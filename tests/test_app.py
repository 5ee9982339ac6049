"""App wiring: config, startup, CORS and health."""

import logging

import pytest
from httpx import ASGITransport, AsyncClient

import main
from core import config
from core.store import PostgrestStore


async def test_health(client):
    res = await client.get("/health")
    assert res.json() == {"status": "ok"}


async def test_cors_allows_any_origin(client):
    res = await client.options(
        "/api/cars",
        headers={
            "Origin": "https://carpool.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert res.headers["access-control-allow-origin"] == "*"


async def test_lifespan_builds_and_closes_store(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    app = main.create_app()

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.store, PostgrestStore)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            assert (await c.get("/")).json() == {"message": "carpool api"}


async def test_lifespan_fails_without_credentials(monkeypatch):
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    app = main.create_app()

    with pytest.raises(config.ConfigError):
        async with app.router.lifespan_context(app):
            pass


def test_load_settings_defaults(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test/")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.delenv("STORE_TIMEOUT_S", raising=False)

    settings = config.load_settings()

    assert settings.store_url == "https://project.supabase.test"
    assert settings.host == "0.0.0.0"
    assert settings.port == 3001
    assert settings.store_timeout_s == 30.0


@pytest.mark.parametrize("missing", ["SUPABASE_URL", "SUPABASE_ANON_KEY"])
def test_load_settings_requires_credentials(monkeypatch, missing):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.setenv(missing, "  ")

    with pytest.raises(config.ConfigError, match=missing):
        config.load_settings()


def test_main_exits_without_credentials(monkeypatch):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    started = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: started.append(args))

    with pytest.raises(SystemExit) as exc_info:
        main.main()

    assert exc_info.value.code == 1
    assert started == []


def test_main_runs_server_with_configured_port(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://project.supabase.test")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.delenv("HOST", raising=False)
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))

    main.main()

    assert calls == [{"host": "0.0.0.0", "port": 8080}]


class BrokenStore:
    """Store whose calls fail with a non-store exception."""

    async def select(self, table, **kwargs):
        raise ValueError("unexpected row type")

    async def insert(self, table, row):
        raise ValueError("unexpected row type")

    async def delete(self, table, **kwargs):
        raise ValueError("unexpected row type")


async def test_unexpected_error_returns_generic_500_with_cors():
    app = main.create_app(store=BrokenStore())

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/persons", headers={"Origin": "https://carpool.example"})

    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error."}
    assert res.headers["access-control-allow-origin"] == "*"


async def test_lifespan_applies_log_level(monkeypatch, store):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    root = logging.getLogger()
    previous = root.level
    app = main.create_app(store=store)

    try:
        async with app.router.lifespan_context(app):
            assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
