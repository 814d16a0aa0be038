"""Models for the lifecycle manager."""

from .config import Configuration
from .runtime import (
    ContainerInfo,
    ContainerState,
    CreateSpec,
    HostDir,
    NamedVolume,
    NoVolume,
    PortMapping,
    ResourceLimits,
    VolumeSpec,
)

__all__ = [
    'Configuration',
    'ContainerInfo',
    'ContainerState',
    'CreateSpec',
    'HostDir',
    'NamedVolume',
    'NoVolume',
    'PortMapping',
    'ResourceLimits',
    'VolumeSpec',
]
