"""Object-space configuration for sensor calibration targets."""

from object_space.config import (
    ConfigError,
    ObjectSpaceConfig,
    load_object_space_config,
)

__version__ = "0.1.0"

__all__ = ["ConfigError", "ObjectSpaceConfig", "load_object_space_config"]
