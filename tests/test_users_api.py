from blogapi.core.security import verify_access_token
from blogapi.modules.users.api import router as user_router
from blogapi.modules.users.models.user import User
from blogapi.modules.users.services.user import get_user_by_email

from conftest import API


def test_signup_returns_token_for_new_user(client, db):
    response = client.post(
        f"{API}/user/signup",
        json={"email": "New.User@Mail.com", "password": "s3cret-pass", "name": "New"},
    )
    assert response.status_code == 200
    token = response.json()["jwt"]

    user = get_user_by_email(db, "new.user@mail.com")
    assert user is not None
    assert user.name == "New"
    assert user.hashed_password != "s3cret-pass"
    assert verify_access_token(token) == user.id


def test_signup_twice_with_same_email_fails(client):
    body = {"email": "dup@mail.com", "password": "s3cret-pass"}
    assert client.post(f"{API}/user/signup", json=body).status_code == 200

    response = client.post(f"{API}/user/signup", json=body)
    assert response.status_code == 400
    assert response.json() == {"error": "Email address already in use"}


def test_signup_losing_insert_race_reports_email_in_use(client, db, alice, monkeypatch):
    # Lookup misses, so the unique index on users.email rejects the insert
    monkeypatch.setattr(user_router, "get_user_by_email", lambda db, email: None)

    response = client.post(
        f"{API}/user/signup",
        json={"email": alice.email, "password": "s3cret-pass"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Email address already in use"}
    assert db.query(User).filter(User.email == alice.email).count() == 1


def test_signup_rejects_malformed_body(client):
    response = client.post(f"{API}/user/signup", json={"email": "not-an-email", "password": "s3cret-pass"})
    assert response.status_code == 422
    assert response.json()["error"] == "Invalid input"

    response = client.post(f"{API}/user/signup", json={"email": "a@mail.com"})
    assert response.status_code == 422

    response = client.post(
        f"{API}/user/signup",
        json={"email": "a@mail.com", "password": "s3cret-pass", "is_admin": True},
    )
    assert response.status_code == 422


def test_signin_with_correct_password_returns_token(client, alice):
    response = client.post(
        f"{API}/user/signin",
        json={"email": "ALICE@mail.com", "password": "s3cret-pass"},
    )
    assert response.status_code == 200
    assert verify_access_token(response.json()["jwt"]) == alice.id


def test_signin_with_wrong_password_is_forbidden(client, alice):
    response = client.post(
        f"{API}/user/signin",
        json={"email": alice.email, "password": "wrong-pass"},
    )
    assert response.status_code == 403
    assert response.json() == {"error": "invalid password"}


def test_signin_unknown_user_is_forbidden(client):
    response = client.post(
        f"{API}/user/signin",
        json={"email": "ghost@mail.com", "password": "whatever"},
    )
    assert response.status_code == 403
    assert response.json() == {"error": "user not found"}


def test_signin_rejects_malformed_body(client):
    response = client.post(f"{API}/user/signin", json={"password": "x"})
    assert response.status_code == 422
