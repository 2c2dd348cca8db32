"""
Simple role-based authorization for FastAPI endpoints.
"""

from typing import List, Optional
from fastapi import Depends, HTTPException, status

from app.auth.jwt_handler import verify_jwt_token
from app.models.user import UserRole


def get_current_user(allowed_roles: Optional[List[UserRole]] = None):
    """
    Dependency factory to create a get_current_user dependency with role checking.

    Args:
        allowed_roles: Roles that are allowed to access the endpoint.
                      If None, any authenticated user can access.

    Returns:
        A FastAPI dependency function

    Example:
        # Allow only ADMIN
        @router.get("/admin-endpoint")
        def admin_only(current_user=Depends(get_current_user([UserRole.ADMIN]))):
            return {"message": "Admin access granted"}

        # Allow any authenticated user
        @router.get("/user-endpoint")
        def any_user(current_user=Depends(get_current_user())):
            return {"message": "User access granted"}
    """
    def dependency(current_user_data: dict = Depends(verify_jwt_token)):
        if not current_user_data:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Unauthorized access."
            )

        # If no roles specified, allow any authenticated user
        if allowed_roles is None:
            return current_user_data

        if current_user_data["role"] not in allowed_roles:
            allowed = ", ".join(role.value for role in allowed_roles)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Unauthorized access. Only {allowed} can perform this action."
            )

        return current_user_data

    return dependency
