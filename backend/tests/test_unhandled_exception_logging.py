import logging
import os
import sys
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Ensure the app package is importable
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from app.exceptions import CorruptStateError, DomainException
from app.main import domain_exception_handler, unhandled_exception_handler


def _app() -> FastAPI:
    app = FastAPI()
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/boom")
    def boom():
        raise ValueError("boom")

    @app.get("/corrupt")
    def corrupt():
        raise CorruptStateError("player1Score is not a padel point marker")

    return app


def test_unhandled_exception_logs_traceback(caplog):
    client = TestClient(_app(), raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["code"] == "internal_server_error"
    record = next((r for r in caplog.records if r.message == "Unhandled exception"), None)
    assert record is not None
    assert record.exc_info[0] is ValueError
    assert "ValueError: boom" in caplog.text


def test_domain_exception_is_not_logged_as_unhandled(caplog):
    client = TestClient(_app(), raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        response = client.get("/corrupt")

    assert response.status_code == 422
    assert response.json()["title"] == "Corrupt score state"
    assert not any(r.message == "Unhandled exception" for r in caplog.records)
