"""Error taxonomy shared by the lifecycle manager."""

from .exceptions import (
    LifecycleError,
    ConfigError,
    MissingFileError,
    MissingRequiredKeyError,
    InvalidValueError,
    HostDirError,
    RuntimeServiceError,
    RuntimeCommandError,
    PullFailedError,
    CreateFailedError,
    ContainerNotFoundError,
    ContainerNotRunningError,
)

__all__ = [
    "LifecycleError",
    "ConfigError",
    "MissingFileError",
    "MissingRequiredKeyError",
    "InvalidValueError",
    "HostDirError",
    "RuntimeServiceError",
    "RuntimeCommandError",
    "PullFailedError",
    "CreateFailedError",
    "ContainerNotFoundError",
    "ContainerNotRunningError",
]
