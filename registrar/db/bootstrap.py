# registrar/db/bootstrap.py
import os
from alembic import command
from alembic.config import Config

from registrar.core.config import settings
from registrar.db.session import SessionLocal
from registrar.db.init_db import init_db

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

def run_migrations_and_seed() -> None:
    cfg = Config(os.path.join(BASE_DIR, "alembic.ini"))
    cfg.set_main_option("script_location", os.path.join(BASE_DIR, "migrations"))

    command.upgrade(cfg, "head")

    if settings.SEED_DEMO_DATA:
        with SessionLocal() as db:
            init_db(db)
