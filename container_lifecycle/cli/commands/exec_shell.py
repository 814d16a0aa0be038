"""Exec command."""

import click

from container_lifecycle.cli.helpers import exit_with_error, get_controller
from ...services.exceptions import LifecycleError


@click.command(name='exec')
@click.pass_context
def exec_shell(ctx):
    """Opens a shell inside the running container."""
    controller = get_controller(ctx)
    try:
        controller.exec_shell()
    except LifecycleError as e:
        exit_with_error(e)
