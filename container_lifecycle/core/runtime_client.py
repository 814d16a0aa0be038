"""Container runtime client built on the Docker SDK."""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable, List, Optional

import docker
import docker.errors
from docker.models.containers import Container

from ..models.runtime import ContainerInfo, ContainerState, CreateSpec
from ..services.exceptions import (
    ContainerNotFoundError,
    CreateFailedError,
    PullFailedError,
    RuntimeCommandError,
    RuntimeServiceError,
)

logger = logging.getLogger(__name__)


class RuntimeClient:
    """Blocking wrapper over the container runtime for a single named container."""

    def __init__(self):
        """Initialize the Docker client and test the connection."""
        try:
            self.client = docker.from_env()
            self.client.ping()
        except docker.errors.DockerException as e:
            if "connection refused" in str(e).lower() or "cannot connect" in str(e).lower():
                raise RuntimeServiceError(
                    "Docker daemon is not running. Please start Docker Desktop, OrbStack or the Docker service."
                ) from e
            else:
                raise RuntimeServiceError(f"Failed to connect to Docker: {e}") from e

    def _find(self, name: str) -> Optional[Container]:
        try:
            return self.client.containers.get(name)
        except docker.errors.NotFound:
            return None
        except docker.errors.APIError as e:
            raise RuntimeCommandError("inspect", f"Failed to inspect container '{name}': {e}") from e

    def _get(self, name: str) -> Container:
        container = self._find(name)
        if container is None:
            raise ContainerNotFoundError(f"Container '{name}' does not exist.")
        return container

    def exists(self, name: str) -> bool:
        """Check whether a container with this exact name exists."""
        return self._find(name) is not None

    def status(self, name: str) -> ContainerState:
        """Get the lifecycle state of a container.

        Args:
            name: Container name

        Returns:
            ABSENT, CREATED, RUNNING or STOPPED
        """
        container = self._find(name)
        if container is None:
            return ContainerState.ABSENT
        logger.debug(f"Container {name} reports status '{container.status}'")
        if container.status == 'running':
            return ContainerState.RUNNING
        if container.status == 'created':
            return ContainerState.CREATED
        return ContainerState.STOPPED

    def describe(self, name: str) -> ContainerInfo:
        """Summarize a container for display.

        Raises:
            ContainerNotFoundError: If the container does not exist
        """
        container = self._get(name)
        ports = []
        for container_port, bindings in sorted((container.ports or {}).items()):
            if not bindings:
                ports.append(container_port)
                continue
            for binding in bindings:
                ports.append(f"{binding['HostIp']}:{binding['HostPort']}->{container_port}")
        return ContainerInfo(
            id=container.short_id,
            name=container.name,
            image=container.attrs.get('Config', {}).get('Image', ''),
            status=container.status,
            ports=", ".join(ports),
        )

    def pull_image(self, ref: str) -> None:
        """Pull an image.

        Raises:
            PullFailedError: If the pull fails
        """
        logger.debug(f"Pulling image {ref}")
        try:
            self.client.images.pull(ref)
        except docker.errors.DockerException as e:
            raise PullFailedError(
                f"Failed to pull image '{ref}'. Check image name or network connection. ({e})"
            ) from e

    def create(self, spec: CreateSpec) -> None:
        """Create (but do not start) a container.

        Args:
            spec: Image, ports, resources, environment and volume for the container

        Raises:
            CreateFailedError: If the runtime rejects the request
        """
        logger.debug(f"Creating container {spec.name} from {spec.image}")
        try:
            self.client.containers.create(
                image=spec.image,
                name=spec.name,
                detach=True,
                ports=spec.ports.to_docker(),
                environment=spec.environment,
                volumes=spec.volume.mounts(spec.mount_target),
                mem_limit=spec.resources.memory,
                nano_cpus=spec.resources.nano_cpus,
            )
        except docker.errors.DockerException as e:
            raise CreateFailedError(f"Failed to create container '{spec.name}': {e}") from e

    def _run_verb(self, verb: str, name: str, action: Callable[[Container], None]) -> None:
        container = self._get(name)
        logger.debug(f"Running {verb} on container {name}")
        try:
            action(container)
        except docker.errors.DockerException as e:
            raise RuntimeCommandError(verb, f"Failed to {verb} container '{name}': {e}") from e

    def start(self, name: str) -> None:
        """Start an existing container."""
        self._run_verb("start", name, lambda c: c.start())

    def stop(self, name: str) -> None:
        """Stop a running container."""
        self._run_verb("stop", name, lambda c: c.stop())

    def remove(self, name: str) -> None:
        """Remove a stopped container."""
        self._run_verb("remove", name, lambda c: c.remove())

    def stream_logs(self, name: str, write: Callable[[str], None]) -> None:
        """Follow a container's logs, forwarding each chunk to write.

        Blocks until the stream ends. KeyboardInterrupt propagates to the caller.
        """
        container = self._get(name)
        try:
            for chunk in container.logs(stream=True, follow=True):
                write(chunk.decode('utf-8', errors='replace'))
        except docker.errors.DockerException as e:
            raise RuntimeCommandError("logs", f"Failed to read logs for '{name}': {e}") from e

    def exec_interactive(self, name: str, command: List[str]) -> int:
        """Open an interactive TTY session in a running container.

        Uses the docker CLI for proper TTY handling.

        Returns:
            Exit status of the session
        """
        docker_cmd = ['docker', 'exec', '-it', name] + list(command)
        logger.debug(f"Executing: {' '.join(docker_cmd)}")
        try:
            result = subprocess.run(docker_cmd)
        except FileNotFoundError as e:
            raise RuntimeServiceError("The docker CLI was not found on PATH.") from e
        return result.returncode

    def volume_exists(self, name: str) -> bool:
        """Check whether a named volume exists."""
        try:
            self.client.volumes.get(name)
            return True
        except docker.errors.NotFound:
            return False
        except docker.errors.APIError as e:
            raise RuntimeCommandError("volume-inspect", f"Failed to inspect volume '{name}': {e}") from e

    def remove_volume(self, name: str) -> None:
        """Remove a named volume and all data in it."""
        logger.debug(f"Removing volume {name}")
        try:
            self.client.volumes.get(name).remove()
        except docker.errors.DockerException as e:
            raise RuntimeCommandError("volume-rm", f"Failed to remove volume '{name}': {e}") from e

    def remove_host_dir(self, path: Path) -> None:
        """Recursively delete a host directory."""
        logger.debug(f"Removing host directory {path}")
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise RuntimeCommandError(
                "rm-dir", f"Failed to remove host directory '{path}'. Check permissions. ({e})"
            ) from e
