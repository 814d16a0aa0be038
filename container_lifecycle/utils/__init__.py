"""Utilities for the lifecycle manager."""

from .config_store import ConfigStore

__all__ = [
    'ConfigStore',
]
