"""Main CLI entry point for the lifecycle manager."""

import click

from .helpers import configure_logging
from .commands.start import start
from .commands.stop import stop
from .commands.status import status
from .commands.logs import logs
from .commands.exec_shell import exec_shell
from .commands.rm import rm
from ..core.constants import DEFAULT_ENV_FILE, ENV_FILE_ENVVAR

VERBS = ['start', 'stop', 'status', 'logs', 'exec', 'rm']


def format_usage(group: click.Group, prog: str = 'container-lifecycle') -> str:
    """Render the usage summary listing every verb."""
    lines = [f"Usage: {prog} {{{'|'.join(VERBS)}}}", "", "Commands:"]
    for verb in VERBS:
        command = group.commands[verb]
        summary = (command.help or "").strip().splitlines()[0]
        lines.append(f"  {verb:<7} - {summary}")
    lines.append("")
    lines.append(f"Remember to configure your {DEFAULT_ENV_FILE} file before starting.")
    return "\n".join(lines)


def prog_name(ctx) -> str:
    if ctx is None:
        return 'container-lifecycle'
    return ctx.find_root().info_name or 'container-lifecycle'


class VerbGroup(click.Group):
    """Group that prints the usage summary and exits 1 on bad invocations."""

    def list_commands(self, ctx):
        return [verb for verb in VERBS if verb in self.commands]

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else ''
        if self.get_command(ctx, cmd_name) is None and not cmd_name.startswith('-'):
            click.echo(format_usage(self, prog_name(ctx)))
            ctx.exit(1)
        return super().resolve_command(ctx, args)

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            self._usage_error(e)

    def invoke(self, ctx):
        # Subcommand arguments are parsed here, after the group's own options
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            self._usage_error(e)

    def _usage_error(self, error: click.UsageError):
        click.echo(f"Error: {error.format_message()}", err=True)
        click.echo(format_usage(self, prog_name(error.ctx)))
        raise click.exceptions.Exit(1)


@click.group(cls=VerbGroup, invoke_without_command=True)
@click.option('--env-file', envvar=ENV_FILE_ENVVAR, default=DEFAULT_ENV_FILE,
              show_default=True, help='Path to the key=value configuration file')
@click.pass_context
def cli(ctx, env_file):
    """Container Lifecycle - Manage one named database container"""
    configure_logging()
    ctx.ensure_object(dict)
    ctx.obj['env_file'] = env_file
    if ctx.invoked_subcommand is None:
        click.echo(format_usage(ctx.command, prog_name(ctx)))
        ctx.exit(1)


# Register commands
cli.add_command(start)
cli.add_command(stop)
cli.add_command(status)
cli.add_command(logs)
cli.add_command(exec_shell)
cli.add_command(rm)


if __name__ == '__main__':
    cli()
