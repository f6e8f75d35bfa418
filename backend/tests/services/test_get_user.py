"""Find User by Email - GET /users?email= parameter checks and lookup."""

import logging

from forum.services.user_service import UserService


async def test_found_returns_200(client, seed_user):
    """An existing email returns the user without password."""
    res = await client.get("/users", params={"email": "a@x.com"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"]["id"] == seed_user.id
    assert "password" not in body["data"]


async def test_unknown_email_returns_404(client, seed_user):
    """An unknown email returns 404 UserNotFound."""
    res = await client.get("/users", params={"email": "nobody@x.com"})
    assert res.status_code == 404
    assert res.json()["error"] == "UserNotFound"


async def test_lookup_is_exact_match(client, seed_user):
    """Lookup is case-sensitive and exact."""
    res = await client.get("/users", params={"email": "A@X.COM"})
    assert res.status_code == 404


async def test_missing_email_returns_client_error(client):
    """Omitting email is a client error."""
    res = await client.get("/users")
    assert res.status_code == 400
    assert res.json() == {"error": "ClientError", "data": None, "success": False}


async def test_repeated_email_returns_client_error(client, seed_user):
    """email given more than once is a client error."""
    res = await client.get("/users?email=a@x.com&email=b@x.com")
    assert res.status_code == 400
    assert res.json()["error"] == "ClientError"


async def test_store_failure_returns_server_error_and_logs(
    client, seed_user, monkeypatch, caplog,
):
    """A failing lookup yields 500 ServerError and logs the cause with traceback."""
    async def broken_find_one(self, condition, exclude_id=None):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(UserService, "_find_one", broken_find_one)

    with caplog.at_level(logging.ERROR):
        res = await client.get("/users", params={"email": "a@x.com"})

    assert res.status_code == 500
    assert res.json() == {"error": "ServerError", "data": None, "success": False}
    assert "connection reset" not in res.text
    assert any(
        "Failed to find user by email" in r.getMessage() and r.exc_info
        for r in caplog.records
    )


async def test_create_failure_returns_server_error(client, monkeypatch):
    """A failing conflict check during create yields 500 ServerError."""
    async def broken_find_one(self, condition, exclude_id=None):
        raise RuntimeError("db down")

    monkeypatch.setattr(UserService, "_find_one", broken_find_one)

    res = await client.post(
        "/users",
        json={"username": "u", "email": "e", "firstName": "f", "lastName": "l"},
    )
    assert res.status_code == 500
    assert res.json()["error"] == "ServerError"
