"""Logs command."""

import click

from container_lifecycle.cli.helpers import exit_with_error, get_controller
from ...services.exceptions import LifecycleError


@click.command()
@click.pass_context
def logs(ctx):
    """Displays live logs from the container (useful for monitoring startup)."""
    controller = get_controller(ctx)
    try:
        controller.logs()
    except KeyboardInterrupt:
        click.echo("\nStopped following logs.")
    except LifecycleError as e:
        exit_with_error(e)
