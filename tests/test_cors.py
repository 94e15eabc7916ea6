from __future__ import annotations

import pytest

EXPECTED = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type, Authorization",
}


@pytest.mark.parametrize("path", ["/person", "/person/1", "/person/abc", "/verify-email"])
def test_preflight_returns_empty_200(client, path):
    resp = client.options(path)
    assert resp.status_code == 200
    assert resp.content == b""
    for name, value in EXPECTED.items():
        assert resp.headers[name] == value


def test_regular_responses_carry_cors_headers(client):
    responses = [
        client.get("/person"),
        client.get("/person/999"),
        client.post("/person", json={}),
        client.post("/verify-email", json={"email": "nope"}),
        client.get("/health"),
    ]
    for resp in responses:
        for name, value in EXPECTED.items():
            assert resp.headers[name] == value


def test_preflight_with_browser_headers(client):
    resp = client.options(
        "/person",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
