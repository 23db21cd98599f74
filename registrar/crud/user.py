# registrar/crud/user.py
from datetime import datetime, timezone
from typing import Dict
from sqlalchemy import select, func
from sqlalchemy.orm import Session
from registrar.crud.base import CRUDBase
from registrar.core.security_password import hash_password
from registrar.models.user import User, UserRole
from registrar.models.tokens import RevokedToken
from registrar.schemas.user import UserCreate, UserOut

class CRUDUser(CRUDBase[User, UserCreate, UserOut]):
    def create(self, db: Session, obj_in: UserCreate, extra=None) -> User:
        data = obj_in.model_dump()
        data["hashed_password"] = hash_password(data.pop("password"))
        data["role"] = UserRole(data["role"])
        if extra: data.update(extra)
        user = User(**data)
        db.add(user); db.commit(); db.refresh(user)
        return user

    def get_by_username(self, db: Session, username: str) -> User | None:
        return db.scalar(select(User).where(User.username == username.strip().lower()))

    def get_by_email(self, db: Session, email: str) -> User | None:
        return db.scalar(select(User).where(User.email == email.strip().lower()))

    def count_by_role(self, db: Session) -> Dict[str, int]:
        rows = db.execute(select(User.role, func.count()).group_by(User.role)).all()
        counts = {r.value: 0 for r in UserRole}
        counts.update({role.value: n for role, n in rows})
        return counts

    def revoke_token(self, db: Session, *, jti: str, username: str, exp: int) -> None:
        if db.scalar(select(RevokedToken).where(RevokedToken.jti == jti)):
            return
        db.add(RevokedToken(jti=jti, username=username, expires_at=datetime.fromtimestamp(exp, tz=timezone.utc)))
        db.commit()

    def is_revoked(self, db: Session, jti: str) -> bool:
        return db.scalar(select(RevokedToken.id).where(RevokedToken.jti == jti)) is not None

user_crud = CRUDUser(User)
