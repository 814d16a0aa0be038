"""Remove command."""

import click

from container_lifecycle.cli.helpers import exit_with_error, get_controller
from ...services.exceptions import LifecycleError


@click.command()
@click.pass_context
def rm(ctx):
    """Removes the container and optionally its data volume/directory."""
    controller = get_controller(ctx)
    try:
        controller.remove()
    except LifecycleError as e:
        exit_with_error(e)
