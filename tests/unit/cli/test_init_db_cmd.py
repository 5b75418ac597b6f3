"""Tests for the init-db command and the migration scripts it runs."""

from click.testing import CliRunner
from sqlalchemy import create_engine, inspect

from cli.main import cli
from scenehub.server.repository.models import Base


def test_init_db_creates_every_mapped_table(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'scenehub.db'}"

    result = CliRunner().invoke(
        cli, ["init-db", "--database-url", database_url, "--system-env"]
    )

    assert result.exit_code == 0, result.output
    assert "Database is up to date." in result.output

    engine = create_engine(database_url)
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert set(Base.metadata.tables) <= tables
    assert "alembic_version" in tables


def test_init_db_is_repeatable(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'scenehub.db'}"
    runner = CliRunner()

    runner.invoke(cli, ["init-db", "--database-url", database_url, "--system-env"])
    result = runner.invoke(cli, ["init-db", "--database-url", database_url, "--system-env"])

    assert result.exit_code == 0, result.output


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output
