# server/tests/test_main.py

import runpy

import uvicorn


def test_entry_point_serves_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9000")

    runpy.run_module("main", run_name="__main__")

    assert calls == [(("main:app",), {"host": "0.0.0.0", "port": 9000})]
