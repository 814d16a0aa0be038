"""Configuration model for the managed container."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import (
    CONTAINER_ENV_VARS,
    DEFAULT_CONTAINER_PORT,
    DEFAULT_CPU_LIMIT,
    DEFAULT_DATA_MOUNT_PATH,
    DEFAULT_EXEC_SHELL,
    DEFAULT_MEMORY_LIMIT,
)


class Configuration(BaseModel):
    """Validated, immutable view of the key=value configuration file."""

    model_config = ConfigDict(frozen=True)

    container_name: str
    image: str
    host_port: int = Field(..., ge=1, le=65535)
    password: Optional[str] = None
    pluggable_db_name: Optional[str] = None
    character_set: Optional[str] = None
    volume_type: Optional[str] = None
    host_data_path: Optional[str] = None
    container_port: int = Field(DEFAULT_CONTAINER_PORT, ge=1, le=65535)
    data_mount_path: str = DEFAULT_DATA_MOUNT_PATH
    memory_limit: str = DEFAULT_MEMORY_LIMIT
    cpu_limit: float = Field(DEFAULT_CPU_LIMIT, gt=0)
    exec_shell: str = DEFAULT_EXEC_SHELL

    def container_environment(self) -> Dict[str, str]:
        """Environment variables to pass into the container."""
        env = {}
        for field_name, env_name in CONTAINER_ENV_VARS.items():
            value = getattr(self, field_name)
            if value:
                env[env_name] = value
        return env
