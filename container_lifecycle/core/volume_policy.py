"""Persistence strategy for the container's data directory."""

from pathlib import Path

from .constants import VOLUME_NAME_SUFFIX, VOLUME_TYPE_HOST_DIR, VOLUME_TYPE_VOLUME
from ..models.config import Configuration
from ..models.runtime import HostDir, NamedVolume, NoVolume, VolumeSpec
from ..services.exceptions import HostDirError, MissingRequiredKeyError


def volume_name(config: Configuration) -> str:
    """Name of the named volume backing a container."""
    return f"{config.container_name}{VOLUME_NAME_SUFFIX}"


def resolve(config: Configuration) -> VolumeSpec:
    """Decide how container data is persisted.

    Args:
        config: Loaded configuration

    Returns:
        NamedVolume for VOLUME, HostDir for HOST_DIR, NoVolume otherwise

    Raises:
        MissingRequiredKeyError: If HOST_DIR is selected without a data path
    """
    if config.volume_type == VOLUME_TYPE_VOLUME:
        return NamedVolume(volume_name(config))
    if config.volume_type == VOLUME_TYPE_HOST_DIR:
        if not config.host_data_path:
            raise MissingRequiredKeyError(
                "DATA_PATH", "DATA_PATH must be set for the HOST_DIR volume type."
            )
        # Bind sources must be absolute or the engine treats them as volume names
        return HostDir(Path(config.host_data_path).expanduser().resolve())
    return NoVolume()


def ensure_host_dir(spec: VolumeSpec) -> None:
    """Create the host directory for a HostDir spec if it is missing."""
    if not isinstance(spec, HostDir):
        return
    try:
        spec.path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise HostDirError(
            f"Could not create host directory '{spec.path}'. Check permissions."
        ) from e


def describe(spec: VolumeSpec) -> str:
    """One-line description of where data lives."""
    if isinstance(spec, NamedVolume):
        return f"named volume '{spec.name}'"
    if isinstance(spec, HostDir):
        return f"host directory '{spec.path}'"
    return "no persistent storage"
