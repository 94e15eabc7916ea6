from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest

# Garantiza que el paquete api sea importable durante los tests locales
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from api.core import config as core_config  # noqa: E402
from api.db import models  # noqa: E402
from api.db import session as db_session  # noqa: E402
from api.services.email_verification_service import (  # noqa: E402
    EmailVerificationService,
    HunterEmailVerifier,
)


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura un SQLite temporal y garantiza teardown completo (Windows bloquea el archivo)."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    # limpia caches para forzar la relectura de envs
    core_config.get_settings.cache_clear()
    db_session.dispose_engine()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=db_session.get_engine())
    except Exception:
        pass
    db_session.dispose_engine()
    core_config.get_settings.cache_clear()
    if db_file.exists():
        try:
            db_file.unlink()
        except Exception:
            pass


class FakeHunter:
    """Records provider calls and answers with a configurable payload."""

    def __init__(self) -> None:
        self.calls: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {"data": {"result": "deliverable"}}
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.payload, (bytes, str)):
            return httpx.Response(self.status_code, content=self.payload)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture()
def hunter() -> FakeHunter:
    return FakeHunter()


def make_verifier(hunter: FakeHunter, api_key: str = "test-key") -> HunterEmailVerifier:
    return HunterEmailVerifier(
        api_key=api_key,
        api_url="https://hunter.test/v2/email-verifier",
        timeout=2.0,
        transport=httpx.MockTransport(hunter),
    )


@pytest.fixture()
def client(temp_db, hunter):
    from api.app import create_app

    app = create_app()
    app.state.email_verification_service = EmailVerificationService(verifier=make_verifier(hunter))
    with TestClient(app) as test_client:
        yield test_client
