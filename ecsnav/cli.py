"""Command line entry point.

Usage:
    $ ecsnav                       # browse, starting at the region list
    $ ecsnav --cluster prod        # only clusters whose name starts with "prod"
    $ ecsnav --key my-key.pem      # SSH key for connect (not supported yet)
    $ ecsnav --version

Exit codes: 0 success, 1 startup/configuration failure, 2 usage error.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import boto3
import click
from botocore.exceptions import BotoCoreError

from ecsnav import __version__
from ecsnav.constants.defaults import DEFAULT_REGION_ENV, LOG_LEVEL_ENV
from ecsnav.constants.values import APP_NAME, RUN_COMPLETE_MESSAGE
from ecsnav.exceptions import ConfigError
from ecsnav.models.state.app_settings import AppSettings
from ecsnav.models.state.config_manager import ConfigManager
from ecsnav.utils.logging_setup import configure_logging
from ecsnav.utils.ssh_keys import resolve_key_path

logger = logging.getLogger(__name__)

EXIT_STARTUP_FAILURE = 1


def build_settings(
    base: AppSettings,
    cluster: str | None,
    key: str | None,
    log_file: str | None,
) -> AppSettings:
    """Apply environment and CLI overrides on top of the settings file."""
    updates: dict[str, object] = {}

    default_region = os.environ.get(DEFAULT_REGION_ENV)
    if default_region:
        updates["default_region"] = default_region
    log_level = os.environ.get(LOG_LEVEL_ENV)
    if log_level:
        updates["log_level"] = log_level

    if cluster is not None:
        updates["cluster_prefix"] = cluster
    if key is not None:
        updates["ssh_key"] = key
    if log_file is not None:
        updates["log_file"] = log_file

    settings = base.model_copy(update=updates)
    if settings.ssh_key:
        settings = settings.model_copy(update={"ssh_key": resolve_key_path(settings.ssh_key)})
    return settings


@click.command(name=APP_NAME, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-c", "--cluster", default=None, help="Cluster name prefix to filter on")
@click.option("-k", "--key", default=None, help="SSH key for connecting (work in progress)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: $ECSNAV_CONFIG or ~/.config/ecsnav/settings.yaml)",
)
@click.option("--log-file", default=None, help="Also write logs to this file")
@click.version_option(__version__, "-v", "--version", prog_name=APP_NAME, message="%(prog)s %(version)s")
def main(
    cluster: str | None,
    key: str | None,
    config_path: Path | None,
    log_file: str | None,
) -> None:
    """Browse AWS ECS clusters and container instances in the terminal."""
    try:
        settings = build_settings(ConfigManager.load(config_path), cluster, key, log_file)
    except ConfigError as e:
        click.echo(f"Error loading settings: {e}", err=True)
        sys.exit(EXIT_STARTUP_FAILURE)

    try:
        configure_logging(settings.log_level, settings.log_file)
    except OSError as e:
        click.echo(f"Error opening log file: {e}", err=True)
        sys.exit(EXIT_STARTUP_FAILURE)

    from ecsnav.app import EcsNavigatorApp
    from ecsnav.controllers.ecs import EcsResourceProvider

    try:
        provider = EcsResourceProvider(boto3.Session())
    except BotoCoreError as e:
        logger.error(f"Unable to load AWS configuration: {e}")
        click.echo(f"Unable to load AWS configuration: {e}", err=True)
        sys.exit(EXIT_STARTUP_FAILURE)

    EcsNavigatorApp(provider, settings).run()
    click.echo(RUN_COMPLETE_MESSAGE)


if __name__ == "__main__":
    main()
