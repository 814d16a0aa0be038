"""Lifecycle orchestration for the managed container.

Every verb first observes the container's state in the runtime and only then
requests a transition, so repeating a verb in the same state is a no-op.
Removing persistent data always goes through the confirm callback, which
must return True for the data to be deleted.
"""

import logging
import shlex
from typing import Callable

import click
from tabulate import tabulate

from . import volume_policy
from .constants import LOCAL_HOST, READY_MESSAGE
from .runtime_client import RuntimeClient
from ..models.config import Configuration
from ..models.runtime import (
    ContainerState,
    CreateSpec,
    HostDir,
    NamedVolume,
    NoVolume,
    PortMapping,
    ResourceLimits,
)
from ..services.exceptions import (
    ContainerNotFoundError,
    ContainerNotRunningError,
    RuntimeCommandError,
)

logger = logging.getLogger(__name__)

# Exit status docker exec reports when it cannot run the command itself;
# every other status belongs to the shell session
EXEC_FAILURE_CODE = 125


class LifecycleController:
    """Runs the start/stop/status/logs/exec/rm verbs against one container."""

    def __init__(
        self,
        config: Configuration,
        runtime: RuntimeClient,
        confirm: Callable[[str], bool],
        echo: Callable[..., None] = click.echo,
    ):
        """Initialize controller.

        Args:
            config: Loaded configuration
            runtime: Client for the container runtime
            confirm: Asks the user a yes/no question, True only on an explicit yes
            echo: Writes a line of user-facing output
        """
        self.config = config
        self.runtime = runtime
        self.confirm = confirm
        self.echo = echo
        self.volume = volume_policy.resolve(config)

    @property
    def name(self) -> str:
        return self.config.container_name

    def build_create_spec(self) -> CreateSpec:
        """Assemble the create request from configuration."""
        return CreateSpec(
            name=self.name,
            image=self.config.image,
            ports=PortMapping(self.config.host_port, self.config.container_port),
            resources=ResourceLimits(self.config.memory_limit, self.config.cpu_limit),
            volume=self.volume,
            mount_target=self.config.data_mount_path,
            environment=self.config.container_environment(),
        )

    def start(self) -> None:
        """Create and start the container, or start it if it already exists."""
        self.echo(f"Attempting to start container '{self.name}'...")
        state = self.runtime.status(self.name)

        if state is ContainerState.ABSENT:
            self._create_and_start()
        elif state is ContainerState.RUNNING:
            self.echo(f"Container '{self.name}' is already running.")
        else:
            self.echo(f"Container '{self.name}' already exists.")
            self.echo(f"Starting existing container '{self.name}'...")
            self.runtime.start(self.name)

        self._print_connection_info()

    def _create_and_start(self) -> None:
        if isinstance(self.volume, NoVolume):
            self.echo(
                "Warning: No persistence configured (volume type not 'VOLUME' or 'HOST_DIR'). "
                "Data will NOT persist across container removal!"
            )
        else:
            self.echo(f"Using {volume_policy.describe(self.volume)} for persistence.")
        volume_policy.ensure_host_dir(self.volume)

        spec = self.build_create_spec()
        self.echo(f"Creating and starting new container '{self.name}'...")
        self.echo(f"Image: {spec.image}")
        self.echo(f"Port Mapping: {spec.ports.host_port}:{spec.ports.container_port}")
        if spec.environment:
            # Names only; values may hold secrets
            self.echo(f"Environment Vars: {', '.join(sorted(spec.environment))}")

        self.runtime.pull_image(spec.image)
        self.runtime.create(spec)
        self.runtime.start(self.name)
        self.echo(f"Container '{self.name}' started. Initialization in progress...")

    def _print_connection_info(self) -> None:
        self.echo("")
        self.echo("=== Connection Information ===")
        self.echo(f"Connect at: {LOCAL_HOST}:{self.config.host_port}")
        self.echo("Monitor startup progress with the 'logs' command.")
        self.echo(f"The service is ready once the logs report '{READY_MESSAGE}'")

    def stop(self) -> None:
        """Stop the container if it is running."""
        self.echo(f"Stopping container '{self.name}'...")
        state = self.runtime.status(self.name)

        if state is ContainerState.ABSENT:
            self.echo(f"Container '{self.name}' does not exist.")
            return
        if state is not ContainerState.RUNNING:
            self.echo(f"Container '{self.name}' is not running.")
            return

        self.runtime.stop(self.name)
        self.echo(f"Container '{self.name}' stopped.")
        if not isinstance(self.volume, NoVolume):
            self.echo(f"Data is preserved in {volume_policy.describe(self.volume)}.")

    def status(self) -> None:
        """Report the container's state and published port."""
        self.echo(f"Checking status of container '{self.name}'...")
        state = self.runtime.status(self.name)
        if state is ContainerState.ABSENT:
            self.echo(f"Container '{self.name}' does not exist.")
            return

        info = self.runtime.describe(self.name)
        self.echo(tabulate(
            [[info.id, info.name, info.image, info.status, info.ports]],
            headers=["CONTAINER ID", "NAME", "IMAGE", "STATUS", "PORTS"],
            tablefmt="simple",
        ))
        self.echo("")
        if state is ContainerState.RUNNING:
            self.echo(f"Container '{self.name}' is running.")
            self.echo(f"Access via: {LOCAL_HOST}:{self.config.host_port}")
        else:
            self.echo(f"Container '{self.name}' is not running.")

    def logs(self) -> None:
        """Follow the container's logs until interrupted."""
        if not self.runtime.exists(self.name):
            raise ContainerNotFoundError(f"Container '{self.name}' does not exist.")
        self.echo(f"Displaying logs for container '{self.name}'. Press Ctrl+C to exit.")
        self.runtime.stream_logs(self.name, lambda text: self.echo(text, nl=False))

    def exec_shell(self) -> None:
        """Open an interactive shell inside the running container."""
        state = self.runtime.status(self.name)
        if state is ContainerState.ABSENT:
            raise ContainerNotFoundError(f"Container '{self.name}' does not exist.")
        if state is not ContainerState.RUNNING:
            raise ContainerNotRunningError(
                f"Container '{self.name}' is not running. Start it first."
            )

        self.echo(f"Executing {self.config.exec_shell} in container '{self.name}'...")
        code = self.runtime.exec_interactive(self.name, shlex.split(self.config.exec_shell))
        if code == EXEC_FAILURE_CODE:
            raise RuntimeCommandError(
                "exec", f"Failed to execute '{self.config.exec_shell}' in '{self.name}' (exit status {code})."
            )
        logger.debug(f"Shell session exited with status {code}")

    def remove(self) -> None:
        """Remove the container, then optionally its persistent data."""
        self.echo(f"Removing container '{self.name}' and associated data...")
        state = self.runtime.status(self.name)
        if state is ContainerState.ABSENT:
            self.echo(f"Container '{self.name}' does not exist.")
            return

        if state is ContainerState.RUNNING:
            try:
                self.runtime.stop(self.name)
            except RuntimeCommandError as e:
                logger.warning(f"Ignoring failed stop before removal: {e}")

        self.runtime.remove(self.name)
        self.echo(f"Container '{self.name}' removed.")

        if isinstance(self.volume, NamedVolume):
            self._remove_named_volume(self.volume)
        elif isinstance(self.volume, HostDir):
            self._remove_host_dir(self.volume)

    def _remove_named_volume(self, volume: NamedVolume) -> None:
        if not self.runtime.volume_exists(volume.name):
            self.echo(f"Named volume '{volume.name}' does not exist.")
            return
        if self.confirm(
            f"WARNING: This will also remove the named volume '{volume.name}' and ALL DATA. Are you sure?"
        ):
            self.runtime.remove_volume(volume.name)
            self.echo(f"Named volume '{volume.name}' removed.")
        else:
            self.echo(f"Volume removal cancelled. Data in '{volume.name}' is preserved.")

    def _remove_host_dir(self, host_dir: HostDir) -> None:
        if not self.confirm(
            f"WARNING: This will remove the host directory '{host_dir.path}' and ALL DATA. Are you sure?"
        ):
            self.echo(f"Host directory removal cancelled. Data in '{host_dir.path}' is preserved.")
            return
        if host_dir.path.is_dir():
            self.runtime.remove_host_dir(host_dir.path)
            self.echo(f"Host directory '{host_dir.path}' removed.")
        else:
            self.echo(f"Host directory '{host_dir.path}' does not exist.")
