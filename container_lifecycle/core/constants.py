"""Constants used throughout the lifecycle manager."""


# Tool configuration
DEFAULT_ENV_FILE = ".env"
ENV_FILE_ENVVAR = "CONTAINER_LIFECYCLE_ENV_FILE"
LOG_LEVEL_ENVVAR = "CONTAINER_LIFECYCLE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Persistence strategies
VOLUME_TYPE_VOLUME = "VOLUME"
VOLUME_TYPE_HOST_DIR = "HOST_DIR"
VOLUME_NAME_SUFFIX = "-data"

# Configuration file keys: field name -> (key, legacy alias)
CONFIG_KEYS = {
    "container_name": ("CONTAINER_NAME", None),
    "image": ("IMAGE", "ORACLE_IMAGE"),
    "host_port": ("HOST_PORT", "ORACLE_PORT"),
    "password": ("PASSWORD", "ORACLE_USER_PASSWORD"),
    "pluggable_db_name": ("PLUGGABLE_DB", "ORACLE_PDB"),
    "character_set": ("CHARACTER_SET", "ORACLE_CHARACTERSET"),
    "volume_type": ("DATA_VOLUME_TYPE", "ORACLE_DATA_VOLUME_TYPE"),
    "host_data_path": ("DATA_PATH", "ORACLE_DATA_PATH"),
    "container_port": ("CONTAINER_PORT", None),
    "data_mount_path": ("DATA_MOUNT_PATH", None),
    "memory_limit": ("MEMORY_LIMIT", None),
    "cpu_limit": ("CPU_LIMIT", None),
    "exec_shell": ("EXEC_SHELL", None),
}
REQUIRED_FIELDS = ("container_name", "image", "host_port")

# Defaults for the tunables the database image expects
DEFAULT_CONTAINER_PORT = 1521
DEFAULT_DATA_MOUNT_PATH = "/opt/oracle/oradata"
DEFAULT_MEMORY_LIMIT = "4g"
DEFAULT_CPU_LIMIT = 2.0
DEFAULT_EXEC_SHELL = "bash"

# Configuration field -> environment variable inside the container
CONTAINER_ENV_VARS = {
    "password": "ORACLE_PWD",
    "pluggable_db_name": "ORACLE_PDB",
    "character_set": "ORACLE_CHARACTERSET",
}

# Host address published ports are reachable on (Docker Desktop / OrbStack)
LOCAL_HOST = "localhost"
READY_MESSAGE = "is open and available."

# Answers accepted by the removal confirmation prompt
AFFIRMATIVE_ANSWERS = ("y", "yes")
