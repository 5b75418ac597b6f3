import click
from sqlalchemy.exc import SQLAlchemyError

from cli.utils import error_exit, load_environment
from scenehub.config import load_config
from scenehub.server.migrations import run_migrations


@click.command(name="init-db")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    default=None,
    help="YAML configuration file (defaults to $SCENEHUB_CONFIG).",
)
@click.option(
    "--database-url",
    default=None,
    help="Database URL; overrides configuration and SCENEHUB_DATABASE_URL.",
)
@click.option(
    "-u",
    "--system-env",
    is_flag=True,
    default=False,
    help="Use system environment variables only; do not load .env file.",
)
def init_db(config_path, database_url, system_env):
    """Create or upgrade the database schema to the latest revision."""
    load_environment(system_env)

    config = load_config(config_path)
    database_url = database_url or config.database.url
    if not database_url:
        error_exit("Error: no database URL configured.")

    click.echo(f"Running migrations against {database_url}")
    try:
        run_migrations(database_url)
    except SQLAlchemyError as e:
        error_exit(f"Error: migration failed: {e}")
    click.echo(click.style("Database is up to date.", fg="green"))
