# registrar/api/v1/users.py
from __future__ import annotations
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from registrar.api.deps import get_db
from registrar.core.rbac import require_roles, ROLE_ADMIN
from registrar.crud.stats import admin_stats
from registrar.crud.user import user_crud
from registrar.schemas.stats import AdminStats
from registrar.schemas.user import UserCreate, UserOut

router = APIRouter()

@router.get("/users", response_model=List[UserOut], dependencies=[Depends(require_roles(ROLE_ADMIN))])
def list_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    return user_crud.get_multi(db, skip=skip, limit=limit)

@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(ROLE_ADMIN))])
def create_user(body: UserCreate, db: Session = Depends(get_db)):
    if user_crud.get_by_username(db, body.username) or user_crud.get_by_email(db, body.email):
        raise HTTPException(status_code=400, detail="User already exists")
    return user_crud.create(db, body)

@router.get("/admin/stats", response_model=AdminStats, dependencies=[Depends(require_roles(ROLE_ADMIN))])
def stats(db: Session = Depends(get_db)):
    return admin_stats(db)
