from datetime import timedelta
from types import SimpleNamespace

import pytest
from fastapi import HTTPException

from app.auth.jwt_handler import create_access_token, create_user_token, verify_jwt_token
from app.models.user import UserRole


def test_user_token_round_trip():
    user = SimpleNamespace(id=7, email="trainer@example.com", role=UserRole.TRAINER)

    claims = verify_jwt_token(create_user_token(user))

    assert claims == {"id": 7, "email": "trainer@example.com", "role": UserRole.TRAINER}


def test_expired_token_rejected():
    token = create_access_token(
        {"sub": "late@example.com", "id": 1, "role": "TRAINEE"},
        expires_delta=timedelta(minutes=-1),
    )

    with pytest.raises(HTTPException) as exc_info:
        verify_jwt_token(token)

    assert exc_info.value.status_code == 401


def test_garbage_token_rejected():
    with pytest.raises(HTTPException) as exc_info:
        verify_jwt_token("not-a-jwt")

    assert exc_info.value.status_code == 401


def test_unknown_role_rejected():
    token = create_access_token({"sub": "owner@example.com", "id": 1, "role": "OWNER"})

    with pytest.raises(HTTPException) as exc_info:
        verify_jwt_token(token)

    assert exc_info.value.status_code == 401
