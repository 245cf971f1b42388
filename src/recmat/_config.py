"""
recmat Config - Access Configuration

Controls how the sparse matrix types treat coordinates outside their
declared dimensions. The default is lenient: reads return zero and writes
grow the row storage. Strict mode raises IndexOutOfBoundsError instead.

The initial strict-bounds default comes from the RECMAT_STRICT_BOUNDS
environment variable.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import Any, Dict, List


def _env_flag(name: str) -> bool:
    return os.environ.get(name, '').lower() in ('1', 'true', 'yes')


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass
class AccessConfig:
    """Configuration for element access."""
    strict_bounds: bool = False    # Raise on coordinates outside the declared shape


def _default_access() -> AccessConfig:
    return AccessConfig(strict_bounds=_env_flag('RECMAT_STRICT_BOUNDS'))


# =============================================================================
# Global Configuration Manager
# =============================================================================

class RecmatConfig:
    """
    Global configuration manager for recmat.

    Example:
        # Global configuration
        recmat.config.strict_bounds = True

        # Local configuration (context manager)
        with recmat.config.local(access=AccessConfig(strict_bounds=True)):
            matrix[10, 20]  # raises IndexOutOfBoundsError on a 5x5 matrix
    """

    def __init__(self):
        self._global_access = _default_access()

        # Thread-local storage for context overrides
        self._local = threading.local()

    @property
    def access(self) -> AccessConfig:
        """Get access configuration."""
        if getattr(self._local, "access", None) is not None:
            return self._local.access
        return self._global_access

    @access.setter
    def access(self, value: AccessConfig):
        """Set global access configuration."""
        self._global_access = value

    @property
    def strict_bounds(self) -> bool:
        """Whether out-of-range coordinates raise."""
        return self.access.strict_bounds

    @strict_bounds.setter
    def strict_bounds(self, value: bool):
        self._global_access.strict_bounds = value

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (access)

        Returns:
            Context manager
        """
        unknown = set(kwargs) - {"access"}
        if unknown:
            raise TypeError(f"Unknown configuration sections: {sorted(unknown)}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs):
        for key, value in kwargs.items():
            if value is not None:
                setattr(self._local, key, value)

    def _clear_local(self, keys: List[str]):
        for key in keys:
            if hasattr(self._local, key):
                setattr(self._local, key, None)

    def reset(self):
        """Reset all configurations to defaults."""
        self._global_access = _default_access()

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "access": {
                "strict_bounds": self.access.strict_bounds,
            },
        }

    def __repr__(self) -> str:
        return f"RecmatConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: RecmatConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._keys = list(kwargs.keys())

    def __enter__(self):
        self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._clear_local(self._keys)
        return False


# =============================================================================
# Global Instance
# =============================================================================

config = RecmatConfig()


def get_config() -> RecmatConfig:
    """Get the global configuration instance."""
    return config


def set_strict_bounds(enabled: bool = True):
    """Enable or disable strict bounds checking globally."""
    config.strict_bounds = enabled


__all__ = [
    "AccessConfig",
    "RecmatConfig",
    "config",
    "get_config",
    "set_strict_bounds",
]
