import logging
import os
import sys

import click
from dotenv import find_dotenv, load_dotenv

log = logging.getLogger(__name__)


def error_exit(message: str):
    click.echo(click.style(message, fg="red"), err=True)
    sys.exit(1)


def load_environment(system_env: bool) -> None:
    """Load a .env file from the working directory upwards unless --system-env is set."""
    if system_env:
        log.warning("Skipping .env file loading due to --system-env flag.")
        return

    env_path = find_dotenv(usecwd=True)
    if not env_path:
        log.warning(
            "Warning: .env file not found in the current directory or parent directories. "
            "Proceeding without loading .env."
        )
        return

    load_dotenv(dotenv_path=env_path, override=True)
    log.info("Loaded environment variables from: %s", os.path.abspath(env_path))
