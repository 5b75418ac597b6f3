import logging
from typing import Optional

import click

from cli.utils import error_exit, load_environment
from scenehub.common.logging_config import parse_log_level, setup_colored_logging
from scenehub.config import load_config


@click.command(name="run")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    default=None,
    help="YAML configuration file (defaults to $SCENEHUB_CONFIG).",
)
@click.option("--host", default=None, help="Bind address; overrides the configuration file.")
@click.option("--port", type=int, default=None, help="Bind port; overrides the configuration file.")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level; overrides the configuration file.",
)
@click.option(
    "-u",
    "--system-env",
    is_flag=True,
    default=False,
    help="Use system environment variables only; do not load .env file.",
)
def run(
    config_path: Optional[str],
    host: Optional[str],
    port: Optional[int],
    log_level: Optional[str],
    system_env: bool,
):
    """
    Run the SceneHub API server.

    Configuration is read from the YAML file, then SCENEHUB_* environment
    variables, then the command line options.
    """
    load_environment(system_env)

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        error_exit(f"Error: could not load configuration: {e}")

    if host:
        config.server.host = host
    if port:
        config.server.port = port
    if log_level:
        config.log_level = log_level

    setup_colored_logging(level=parse_log_level(config.log_level))
    log = logging.getLogger(__name__)

    import uvicorn

    from scenehub.server.app import create_app

    app = create_app(config)
    log.info(
        "Starting SceneHub on http://%s:%s%s",
        config.server.host,
        config.server.port,
        config.server.api_prefix,
    )
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )
