# registrar/core/security_password.py
from __future__ import annotations
from typing import Tuple
from passlib.context import CryptContext

# hashes stored with other cost parameters are rehashed on the next login
pwd_context = CryptContext(
    schemes=["argon2"],
    argon2__time_cost=2,
    argon2__memory_cost=19456,
    argon2__parallelism=1,
)

def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)

def verify_and_maybe_upgrade(plain: str, stored_hash: str) -> Tuple[bool, str | None]:
    """Check a login password against the stored hash.

    Returns ``(ok, new_hash)``. ``new_hash`` is only set when the stored hash
    was made with weaker argon2 parameters than the current ones; the caller
    persists it.
    """
    ok, new_hash = pwd_context.verify_and_update(plain, stored_hash)
    return ok, new_hash
