import pytest

from app.models import User, UserRole


@pytest.mark.parametrize("role", ["TRAINER", "TRAINEE"])
def test_admin_creates_user_with_profile(client, admin_headers, db_session, role):
    response = client.post(
        "/api/users/create",
        json={"email": "staff@gym.com", "password": "secret1", "name": "Staff Member", "role": role},
        headers=admin_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "User created successfully"
    assert body["data"]["role"] == role
    assert body["data"]["email"] == "staff@gym.com"
    assert "passwordHash" not in body["data"]

    user = db_session.query(User).filter(User.email == "staff@gym.com").one()
    if role == "TRAINER":
        assert user.trainer is not None and user.trainee is None
    else:
        assert user.trainee is not None and user.trainer is None


def test_admin_cannot_create_admin(client, admin_headers):
    response = client.post(
        "/api/users/create",
        json={"email": "boss@gym.com", "password": "secret1", "name": "Boss", "role": "ADMIN"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Validation error occurred."


def test_create_user_duplicate_email(client, admin_headers, test_trainer):
    response = client.post(
        "/api/users/create",
        json={"email": "trainer@gym.com", "password": "secret1", "name": "Again", "role": "TRAINER"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "User with this email already exists."


def test_only_admin_creates_users(client, trainer_headers):
    response = client.post(
        "/api/users/create",
        json={"email": "x@gym.com", "password": "secret1", "name": "X", "role": "TRAINEE"},
        headers=trainer_headers,
    )

    assert response.status_code == 403


def test_list_users(client, admin_headers, test_trainer, test_trainee):
    response = client.get("/api/users", headers=admin_headers)

    assert response.status_code == 200
    roles = sorted(user["role"] for user in response.json()["data"])
    assert roles == sorted([UserRole.ADMIN.value, UserRole.TRAINER.value, UserRole.TRAINEE.value])


def test_list_users_admin_only(client, trainee_headers):
    assert client.get("/api/users", headers=trainee_headers).status_code == 403
