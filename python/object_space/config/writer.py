"""
Configuration writing for object-space files.

The inverse of ``loader``: encodes an ObjectSpaceConfig back to TOML, mainly
for tooling and debugging. Output uses the same wire spelling the loader
accepts, so ``load_config_text(dump_config_text(config)) == config``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import toml

from .base import ObjectSpaceConfig
from .exceptions import ResourceError
from .validation import check_config

logger = logging.getLogger(__name__)

__all__ = ["dump_config_text", "write_object_space_config"]


def dump_config_text(config: ObjectSpaceConfig) -> str:
    """
    Render a configuration as TOML text.

    Parameters
    ----------
    config
        Configuration to encode.

    Returns
    -------
    str
        TOML document with ``[camera.detector]`` and ``[camera.descriptor]``
        tables.
    """
    return toml.dumps(config.to_dict())


def write_object_space_config(config: ObjectSpaceConfig, path: str | Path) -> None:
    """
    Write a configuration to a TOML file.

    The configuration is checked before anything is written.

    Parameters
    ----------
    config
        Configuration to write.
    path
        Destination file; overwritten if it exists.

    Raises
    ------
    SchemaError
        If the configuration violates a value constraint.
    ResourceError
        If the file cannot be written.
    """
    check_config(config)
    path = Path(path)
    logger.debug(f"Writing object-space configuration to {path}")
    try:
        path.write_text(dump_config_text(config), encoding="utf-8")
    except OSError as err:
        raise ResourceError(str(path), err.strerror or str(err)) from err
