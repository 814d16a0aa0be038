"""CLI Helper Functions for the lifecycle manager.

This module provides reusable helper functions for the verb commands so that
every verb loads configuration, reports errors and exits the same way.

The helpers provide:
- Logging setup from the environment
- Configuration loading and controller construction
- The default-deny confirmation prompt
- Consistent error reporting and exit codes
"""

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

import click

from container_lifecycle.core import volume_policy
from container_lifecycle.core.constants import (
    AFFIRMATIVE_ANSWERS,
    DEFAULT_ENV_FILE,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_LEVEL_ENVVAR,
)
from container_lifecycle.core.controller import LifecycleController
from container_lifecycle.core.runtime_client import RuntimeClient
from container_lifecycle.services.exceptions import LifecycleError
from container_lifecycle.utils.config_store import ConfigStore


def configure_logging() -> None:
    """Configure root logging from CONTAINER_LIFECYCLE_LOG_LEVEL."""
    level_name = os.environ.get(LOG_LEVEL_ENVVAR, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def exit_with_error(error: Exception) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def prompt_confirmation(message: str) -> bool:
    """Ask a yes/no question that defaults to no.

    Only 'y' or 'yes' (any case) counts as agreement. Empty input, anything
    else, end of input and Ctrl+C all decline.
    """
    try:
        reply = click.prompt(f"{message} (y/N)", default="", show_default=False)
    except click.Abort:
        click.echo("")
        return False
    return reply.strip().lower() in AFFIRMATIVE_ANSWERS


def get_env_file(ctx: click.Context) -> Path:
    """Get the configuration file path chosen on the command group."""
    obj = ctx.find_root().obj or {}
    return Path(obj.get('env_file', DEFAULT_ENV_FILE))


def get_controller(ctx: click.Context) -> LifecycleController:
    """Load configuration and connect to the runtime.

    Configuration is fully validated before the runtime is contacted.

    Note:
        Exits with an error message on any failure.
    """
    env_file = get_env_file(ctx)
    try:
        click.echo(f"Loading configuration from {env_file} file...")
        config = ConfigStore(env_file).load()
        volume_policy.resolve(config)
        runtime = RuntimeClient()
    except LifecycleError as e:
        exit_with_error(e)
    return LifecycleController(config, runtime, confirm=prompt_confirmation)
