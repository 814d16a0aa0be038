"""Stop command."""

import click

from container_lifecycle.cli.helpers import exit_with_error, get_controller
from ...services.exceptions import LifecycleError


@click.command()
@click.pass_context
def stop(ctx):
    """Stops the container. Data is preserved."""
    controller = get_controller(ctx)
    try:
        controller.stop()
    except LifecycleError as e:
        exit_with_error(e)
