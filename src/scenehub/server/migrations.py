"""
Alembic helpers used on startup and by the init-db command.
"""

import logging
import os

from alembic import command
from alembic.config import Config

log = logging.getLogger(__name__)


def build_alembic_config(database_url: str) -> Config:
    alembic_cfg = Config()
    alembic_cfg.set_main_option(
        "script_location",
        os.path.join(os.path.dirname(__file__), "alembic"),
    )
    # ConfigParser interpolation treats % specially
    alembic_cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return alembic_cfg


def run_migrations(database_url: str, revision: str = "head") -> None:
    """Upgrade the database schema to the given revision."""
    log.info("Running database migrations to %s", revision)
    command.upgrade(build_alembic_config(database_url), revision)
    log.info("Database migrations complete")
