"""Start command."""

import click

from container_lifecycle.cli.helpers import exit_with_error, get_controller
from ...services.exceptions import LifecycleError


@click.command()
@click.pass_context
def start(ctx):
    """Creates and starts the container (or starts it if it already exists)."""
    controller = get_controller(ctx)
    try:
        controller.start()
    except LifecycleError as e:
        exit_with_error(e)
