"""Loading and validation of the key=value configuration file."""

import logging
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values
from pydantic import ValidationError

from ..core.constants import CONFIG_KEYS, REQUIRED_FIELDS
from ..models.config import Configuration
from ..services.exceptions import (
    InvalidValueError,
    MissingFileError,
    MissingRequiredKeyError,
)

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads a .env style file and turns it into a Configuration."""

    def __init__(self, path: Path):
        """Initialize config store."""
        self.path = Path(path)
        self._values: Optional[Dict[str, str]] = None

    def _read(self) -> Dict[str, str]:
        if self._values is None:
            if not self.path.is_file():
                raise MissingFileError(self.path)
            logger.debug(f"Reading configuration from {self.path}")
            raw = dotenv_values(self.path)
            # Empty values count as unset
            self._values = {k: v.strip() for k, v in raw.items() if v and v.strip()}
        return self._values

    def get(self, key: str) -> Optional[str]:
        """Get an optional value by file key, or None when unset."""
        return self._read().get(key)

    def require(self, key: str) -> str:
        """Get a value by file key, raising if it is unset."""
        value = self.get(key)
        if value is None:
            raise MissingRequiredKeyError(key)
        return value

    def _lookup(self, field_name: str) -> Optional[str]:
        key, alias = CONFIG_KEYS[field_name]
        value = self.get(key)
        if value is None and alias:
            value = self.get(alias)
        return value

    def load(self) -> Configuration:
        """Load and validate the configuration.

        Returns:
            Validated Configuration

        Raises:
            MissingFileError: If the file does not exist
            MissingRequiredKeyError: If a required key is absent or empty
            InvalidValueError: If a value has the wrong shape
        """
        fields = {}
        for field_name in CONFIG_KEYS:
            value = self._lookup(field_name)
            if value is not None:
                fields[field_name] = value

        missing = [CONFIG_KEYS[name][0] for name in REQUIRED_FIELDS if name not in fields]
        if missing:
            raise MissingRequiredKeyError(
                missing[0],
                f"Essential variables ({', '.join(missing)}) are not set in {self.path}.",
            )

        try:
            config = Configuration(**fields)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = error['loc'][0] if error['loc'] else None
            key = CONFIG_KEYS.get(field_name, (field_name,))[0]
            raise InvalidValueError(
                f"Invalid value for '{key}' in {self.path}: {error['msg']}"
            ) from e

        logger.debug(f"Loaded configuration for container '{config.container_name}'")
        return config
