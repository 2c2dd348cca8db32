"""
Tests for the role-based authorization dependency.
"""

import pytest
from fastapi import HTTPException

from app.auth.permissions import get_current_user
from app.models.user import UserRole


class TestRoleAuthorization:
    """Calls the dependency directly with decoded token data"""

    def test_no_roles_required(self):
        """Any authenticated user passes when no roles are specified"""
        mock_user = {"id": 1, "role": UserRole.TRAINEE, "email": "trainee@example.com"}

        dependency = get_current_user()

        assert dependency(mock_user) == mock_user

    def test_correct_role(self):
        mock_user = {"id": 1, "role": UserRole.ADMIN, "email": "admin@example.com"}

        dependency = get_current_user([UserRole.ADMIN])

        assert dependency(mock_user) == mock_user

    def test_one_of_multiple_allowed_roles(self):
        mock_user = {"id": 2, "role": UserRole.TRAINER, "email": "trainer@example.com"}

        dependency = get_current_user([UserRole.ADMIN, UserRole.TRAINER])

        assert dependency(mock_user) == mock_user

    def test_wrong_role_gets_403(self):
        """A trainee may not use an admin-only endpoint"""
        mock_user = {"id": 3, "role": UserRole.TRAINEE, "email": "trainee@example.com"}

        dependency = get_current_user([UserRole.ADMIN])

        with pytest.raises(HTTPException) as exc_info:
            dependency(mock_user)

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Unauthorized access. Only ADMIN can perform this action."

    def test_forbidden_message_lists_all_allowed_roles(self):
        mock_user = {"id": 3, "role": UserRole.TRAINEE, "email": "trainee@example.com"}

        dependency = get_current_user([UserRole.ADMIN, UserRole.TRAINER])

        with pytest.raises(HTTPException) as exc_info:
            dependency(mock_user)

        assert "ADMIN, TRAINER" in exc_info.value.detail

    def test_missing_user_data_gets_401(self):
        dependency = get_current_user([UserRole.ADMIN])

        with pytest.raises(HTTPException) as exc_info:
            dependency(None)

        assert exc_info.value.status_code == 401
