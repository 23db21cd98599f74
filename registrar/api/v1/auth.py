# registrar/api/v1/auth.py
from __future__ import annotations
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from registrar.api.deps import get_db, get_current_user, get_token_payload
from registrar.core.security_password import verify_and_maybe_upgrade
from registrar.core.tokens import create_access_token
from registrar.crud.user import user_crud
from registrar.models.user import User
from registrar.schemas.user import LoginIn, Token, UserCreate, UserOut

logger = logging.getLogger(__name__)
router = APIRouter()

def _issue(user: User) -> Token:
    token = create_access_token(sub=user.username, role=user.role.value)
    return Token(access_token=token, user=UserOut.model_validate(user))

@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, db: Session = Depends(get_db)):
    # self-service sign-up always yields a student; staff accounts come from the seed or an admin
    if user_crud.get_by_username(db, body.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    if user_crud.get_by_email(db, body.email):
        raise HTTPException(status_code=400, detail="Email already exists")
    user = user_crud.create(db, body.model_copy(update={"role": "student"}))
    logger.info("registered user id=%s username=%s", user.id, user.username)
    return _issue(user)

@router.post("/login", response_model=Token)
def login(body: LoginIn, db: Session = Depends(get_db)):
    user = user_crud.get_by_username(db, body.username)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    ok, new_hash = verify_and_maybe_upgrade(body.password, user.hashed_password)
    if not ok:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if new_hash:
        user.hashed_password = new_hash
        db.add(user); db.commit()
    return _issue(user)

@router.post("/logout")
def logout(payload: Dict[str, Any] = Depends(get_token_payload), db: Session = Depends(get_db)):
    user_crud.revoke_token(db, jti=payload["jti"], username=payload["sub"], exp=payload["exp"])
    return {"ok": True}

@router.get("/user", response_model=UserOut)
def current_user(user: User = Depends(get_current_user)):
    return user
