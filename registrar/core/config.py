# registrar/core/config.py
import os
from typing import ClassVar, List
from pydantic import BaseModel, Field

from dotenv import load_dotenv

load_dotenv()

def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

def _default_database_url() -> str:
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(data_dir, 'registrar.db')}")

def _cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in raw.split(",") if o.strip()]

class Settings(BaseModel):
    # constant, not a pydantic field
    DATA_DIR: ClassVar[str] = os.path.abspath(os.getenv("DATA_DIR", "./data"))

    DATABASE_URL: str = Field(default_factory=_default_database_url)
    SECRET_KEY: str = Field(default_factory=lambda: os.getenv("SECRET_KEY", "CHANGE_ME_SUPER_SECRET"))
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    CORS_ORIGINS: List[str] = Field(default_factory=_cors_origins)
    SEED_DEMO_DATA: bool = Field(default_factory=lambda: _flag("SEED_DEMO_DATA", "true"))

    # enrollment policy
    ENROLLMENT_ALLOW_REENROLL_AFTER_DROP: bool = Field(
        default_factory=lambda: _flag("ENROLLMENT_ALLOW_REENROLL_AFTER_DROP", "false")
    )
    ENROLLMENT_ENFORCE_OWNERSHIP: bool = Field(
        default_factory=lambda: _flag("ENROLLMENT_ENFORCE_OWNERSHIP", "true")
    )

settings = Settings()
