import logging

import click

from cli import __version__
from cli.commands.init_db_cmd import init_db
from cli.commands.run_cmd import run
from scenehub.common.logging_config import setup_colored_logging

setup_colored_logging(level=logging.INFO)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__, "-v", "--version", help="Show the CLI version and exit."
)
def cli():
    """SceneHub CLI Application"""
    pass


cli.add_command(run)
cli.add_command(init_db)


def main():
    cli()


if __name__ == "__main__":
    main()
