"""Runtime-facing models: container state, volume specs and create requests."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Union


class ContainerState(Enum):
    """Lifecycle state of the managed container as observed in the runtime."""
    ABSENT = "absent"
    CREATED = "created"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class NoVolume:
    """No persistence; data is lost with the container."""

    def mounts(self, target: str) -> Dict[str, Dict[str, str]]:
        return {}


@dataclass(frozen=True)
class NamedVolume:
    """Runtime-managed named volume."""
    name: str

    def mounts(self, target: str) -> Dict[str, Dict[str, str]]:
        return {self.name: {'bind': target, 'mode': 'rw'}}


@dataclass(frozen=True)
class HostDir:
    """Directory on the host bound into the container."""
    path: Path

    def mounts(self, target: str) -> Dict[str, Dict[str, str]]:
        return {str(self.path): {'bind': target, 'mode': 'rw'}}


VolumeSpec = Union[NoVolume, NamedVolume, HostDir]


@dataclass(frozen=True)
class PortMapping:
    """Host port published to a container port."""
    host_port: int
    container_port: int

    def to_docker(self) -> Dict[str, int]:
        return {f"{self.container_port}/tcp": self.host_port}


@dataclass(frozen=True)
class ResourceLimits:
    """Memory and CPU caps for the container."""
    memory: str
    cpus: float

    @property
    def nano_cpus(self) -> int:
        return int(self.cpus * 1_000_000_000)


@dataclass(frozen=True)
class CreateSpec:
    """Everything the runtime needs to create the container."""
    name: str
    image: str
    ports: PortMapping
    resources: ResourceLimits
    volume: VolumeSpec
    mount_target: str
    environment: Dict[str, str] = field(default_factory=dict)


@dataclass
class ContainerInfo:
    """Summary row describing a container."""
    id: str
    name: str
    image: str
    status: str
    ports: str
