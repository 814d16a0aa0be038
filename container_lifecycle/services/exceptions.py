"""Custom exceptions for the lifecycle manager."""

from typing import Optional


class LifecycleError(Exception):
    """Base exception for all lifecycle errors."""

    pass


class ConfigError(LifecycleError):
    """Exception raised for configuration problems."""

    pass


class MissingFileError(ConfigError):
    """Exception raised when the configuration file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"{path} file not found. Please create it with your container configuration."
        )


class MissingRequiredKeyError(ConfigError):
    """Exception raised when a required configuration key is absent or empty."""

    def __init__(self, key: str, detail: Optional[str] = None):
        self.key = key
        super().__init__(detail or f"Required key '{key}' is not set in the configuration file.")


class InvalidValueError(ConfigError):
    """Exception raised when a configuration value cannot be used."""

    pass


class HostDirError(ConfigError):
    """Exception raised when the host data directory cannot be created."""

    pass


class RuntimeServiceError(LifecycleError):
    """Exception raised when the container runtime cannot be reached."""

    pass


class RuntimeCommandError(LifecycleError):
    """Exception raised when a runtime command exits unsuccessfully."""

    def __init__(self, verb: str, message: str):
        self.verb = verb
        super().__init__(message)


class PullFailedError(RuntimeCommandError):
    """Exception raised when an image cannot be pulled."""

    def __init__(self, message: str):
        super().__init__("pull", message)


class CreateFailedError(RuntimeCommandError):
    """Exception raised when a container cannot be created."""

    def __init__(self, message: str):
        super().__init__("create", message)


class ContainerNotFoundError(LifecycleError):
    """Exception raised when the managed container does not exist."""

    pass


class ContainerNotRunningError(LifecycleError):
    """Exception raised when a verb needs a running container."""

    pass
