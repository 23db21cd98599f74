# registrar/core/rbac.py
from fastapi import Depends, HTTPException, status
from registrar.api.deps import get_current_user
from registrar.models.user import UserRole

ROLE_STUDENT = UserRole.student.value
ROLE_FACULTY = UserRole.faculty.value
ROLE_ADMIN = UserRole.admin.value

def _role_name(user) -> str:
    role = getattr(user, "role", None)
    return getattr(role, "value", role) or ""

def require_roles(*roles: str):
    allowed = set(roles)
    def dep(user = Depends(get_current_user)):
        if _role_name(user) not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden: Insufficient permissions")
        return user
    return dep
