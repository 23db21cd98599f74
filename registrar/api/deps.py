# registrar/api/deps.py
from typing import Any, Dict
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from registrar.db.session import get_db
from registrar.core.tokens import decode_access
from registrar.crud.user import user_crud
from registrar.models.user import User

# ----------------------------------------------------------------------
# Bearer read straight from the Authorization header
# ----------------------------------------------------------------------
def get_bearer_token(authorization: str = Header(None, alias="Authorization")) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Unauthorized")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid Authorization header")
    return parts[1]

def get_token_payload(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    payload = decode_access(token)
    if not payload:
        raise HTTPException(status_code=401, detail="Invalid token")
    if user_crud.is_revoked(db, payload["jti"]):
        raise HTTPException(status_code=401, detail="Token revoked")
    return payload

def get_current_user(
    payload: Dict[str, Any] = Depends(get_token_payload),
    db: Session = Depends(get_db),
) -> User:
    user = user_crud.get_by_username(db, payload["sub"])
    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
