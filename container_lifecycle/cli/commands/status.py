"""Status command."""

import click

from container_lifecycle.cli.helpers import exit_with_error, get_controller
from ...services.exceptions import LifecycleError


@click.command()
@click.pass_context
def status(ctx):
    """Shows the current status of the container."""
    controller = get_controller(ctx)
    try:
        controller.status()
    except LifecycleError as e:
        exit_with_error(e)
