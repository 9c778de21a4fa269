"""
Authentication routes exercised through the FastAPI test client.
"""

import uuid
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient
from helpers import auth_headers, signup

from gamehub.utils.auth import TokenService


def test_health_check(client: TestClient):
    response = client.get("/api/")

    assert response.status_code == 200
    assert response.json() == {"message": "GameHub API is running!"}


def test_signup_returns_token_and_user(client: TestClient):
    response = client.post(
        "/api/auth/signup", json={"username": "alice", "password": "wonderland"}
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    assert body["token"]
    assert body["user"]["username"] == "alice"
    assert uuid.UUID(body["user"]["id"])
    assert "password" not in response.text
    assert "hashedPassword" not in response.text


def test_signup_duplicate_username(client: TestClient):
    signup(client, "alice")

    response = client.post(
        "/api/auth/signup", json={"username": "alice", "password": "different1"}
    )

    assert response.status_code == 400
    assert response.json() == {"message": "User already exists"}


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "al", "password": "wonderland"},
        {"username": "alice", "password": "short"},
        {"username": "a" * 51, "password": "wonderland"},
        {"username": "alice"},
        {},
    ],
)
def test_signup_rejects_invalid_payload(client: TestClient, payload):
    response = client.post("/api/auth/signup", json=payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request payload"}


def test_signin_with_valid_credentials(client: TestClient):
    signup(client, "alice", "wonderland")

    response = client.post(
        "/api/auth/signin", json={"username": "alice", "password": "wonderland"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"]["username"] == "alice"

    profile = client.get("/api/user/profile", headers=auth_headers(body["token"]))
    assert profile.status_code == 200


def test_signin_failures_look_the_same(client: TestClient):
    signup(client, "alice", "wonderland")

    wrong_password = client.post(
        "/api/auth/signin", json={"username": "alice", "password": "looking-glass"}
    )
    unknown_user = client.post(
        "/api/auth/signin", json={"username": "nobody", "password": "wonderland"}
    )

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json() == {
        "message": "Invalid credentials"
    }


def test_logout_acknowledges(client: TestClient):
    token = signup(client, "alice")

    response = client.post("/api/auth/logout", headers=auth_headers(token))

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Logged out successfully"}


def test_is_auth_with_valid_token(client: TestClient):
    token = signup(client, "alice")

    response = client.post("/api/auth/is-auth", headers=auth_headers(token))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["username"] == "alice"
    assert "createdAt" in body["user"]


def test_is_auth_without_token(client: TestClient):
    response = client.post("/api/auth/is-auth")

    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "Please login first"}


def test_is_auth_with_token_of_deleted_user(client: TestClient):
    token = TokenService("test-secret-key").issue(uuid.uuid4())

    response = client.post("/api/auth/is-auth", headers=auth_headers(token))

    assert response.json() == {"success": False, "message": "Not authorized"}


def test_protected_route_without_token_is_401(client: TestClient):
    response = client.get("/api/quiz/history")

    assert response.status_code == 401
    assert response.json() == {"message": "Access token required"}
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_protected_route_with_garbage_token_is_403(client: TestClient):
    response = client.get("/api/quiz/history", headers=auth_headers("garbage"))

    assert response.status_code == 403
    assert response.json() == {"message": "Invalid token"}


def test_protected_route_with_foreign_signature_is_403(client: TestClient):
    token = TokenService("someone-elses-secret").issue(uuid.uuid4())

    response = client.get("/api/user/profile", headers=auth_headers(token))

    assert response.status_code == 403


def test_protected_route_with_expired_token_is_403(client: TestClient):
    token = TokenService("test-secret-key").issue(
        uuid.uuid4(), expires_delta=timedelta(seconds=-5)
    )

    response = client.get("/api/user/profile", headers=auth_headers(token))

    assert response.status_code == 403
    assert response.json() == {"message": "Token has expired"}


def test_token_with_non_uuid_subject_is_403(client: TestClient):
    token = TokenService("test-secret-key").issue("not-a-uuid")

    response = client.get("/api/user/profile", headers=auth_headers(token))

    assert response.status_code == 403
    assert response.json() == {"message": "Invalid token"}
