"""
Configuration loading for object-space files.

This module provides:
- read_config_source: Read the raw bytes of a configuration file
- parse_config_text: Parse TOML text into a plain tree
- decode_config: Decode a TOML tree into an ObjectSpaceConfig
- load_config_text: Parse, decode and check in-memory text
- load_object_space_config: Load and check a configuration file
"""

from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import fields
from pathlib import Path
from typing import Any, get_type_hints

from .base import DetectorDescriptor, ObjectSpaceConfig
from .exceptions import ConfigSyntaxError, ResourceError
from .models import Descriptor, Detector, descriptor_variants, detector_variants
from .registry import VariantTable
from .validation import (
    DISCRIMINATOR,
    check_config,
    check_keys,
    decode_value,
    expect_table,
    join_path,
    read_discriminator,
)

logger = logging.getLogger(__name__)

__all__ = [
    "decode_config",
    "load_config_text",
    "load_object_space_config",
    "parse_config_text",
    "read_config_source",
]

_POSITION = re.compile(r"\(at line (\d+), column (\d+)\)")


def read_config_source(path: str | Path) -> bytes:
    """
    Read the full contents of a configuration file.

    Parameters
    ----------
    path
        Path to the TOML configuration file.

    Returns
    -------
    bytes
        Raw file contents.

    Raises
    ------
    ResourceError
        If the file cannot be read (missing, permission denied, I/O fault).
    """
    path = Path(path)
    logger.debug(f"Reading object-space configuration from {path}")
    try:
        return path.read_bytes()
    except OSError as err:
        raise ResourceError(str(path), err.strerror or str(err)) from err


def parse_config_text(text: str | bytes) -> dict[str, Any]:
    """
    Parse TOML text into a plain tree of tables, arrays and scalars.

    Parameters
    ----------
    text
        TOML document. Bytes are decoded as UTF-8.

    Returns
    -------
    dict[str, Any]
        Parsed document.

    Raises
    ------
    ConfigSyntaxError
        If the text is not valid UTF-8 or not well-formed TOML.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as err:
            msg = f"not valid UTF-8 ({err.reason} at byte {err.start})"
            raise ConfigSyntaxError(msg) from err

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as err:
        lineno = getattr(err, "lineno", None)
        colno = getattr(err, "colno", None)
        if lineno is None:
            # Older tomllib only reports the position inside the message
            match = _POSITION.search(str(err))
            if match:
                lineno, colno = int(match.group(1)), int(match.group(2))
        raise ConfigSyntaxError(str(err), lineno, colno) from err


def _decode_variant(data: Any, table: VariantTable, path: str) -> Any:
    block = expect_table(data, path)
    tag = read_discriminator(block, table.name, path)
    cls = table.get(tag, join_path(path, DISCRIMINATOR))
    logger.debug(f"Selected {table.name} variant '{tag}' at '{path}'")

    names = [f.name for f in fields(cls)]
    payload = {key: value for key, value in block.items() if key != DISCRIMINATOR}
    check_keys(payload, names, path)

    hints = get_type_hints(cls)
    return cls(
        **{
            name: decode_value(payload[name], hints[name], join_path(path, name))
            for name in names
        }
    )


def _decode_detector(data: Any, path: str) -> Detector:
    return _decode_variant(data, detector_variants, path)


def _decode_descriptor(data: Any, path: str) -> Descriptor:
    return _decode_variant(data, descriptor_variants, path)


def _decode_detector_descriptor(data: Any, path: str) -> DetectorDescriptor:
    block = expect_table(data, path)
    check_keys(block, ["detector", "descriptor"], path)
    return DetectorDescriptor(
        detector=_decode_detector(block["detector"], join_path(path, "detector")),
        descriptor=_decode_descriptor(
            block["descriptor"], join_path(path, "descriptor")
        ),
    )


def decode_config(tree: dict[str, Any]) -> ObjectSpaceConfig:
    """
    Decode a parsed TOML tree into an ObjectSpaceConfig.

    Every table must contain exactly its declared keys; unknown keys are
    errors at every level, including the top level. Only structure and types
    are checked here, see ``check_config`` for value constraints.

    Parameters
    ----------
    tree
        Parsed TOML document.

    Returns
    -------
    ObjectSpaceConfig
        Decoded configuration.

    Raises
    ------
    SchemaError
        On the first structural or type problem found.
    """
    check_keys(tree, ["camera"], "")
    camera = _decode_detector_descriptor(tree["camera"], "camera")
    return ObjectSpaceConfig(camera=camera)


def load_config_text(text: str | bytes) -> ObjectSpaceConfig:
    """
    Parse, decode and check an object-space configuration held in memory.

    Parameters
    ----------
    text
        TOML document.

    Returns
    -------
    ObjectSpaceConfig
        Fully validated configuration.

    Raises
    ------
    ConfigSyntaxError
        If the text is not well-formed TOML.
    SchemaError
        If the document does not describe a valid object space.

    Examples
    --------
    >>> config = load_config_text('''
    ... [camera.detector]
    ... type = "checkerboard"
    ... width = 8
    ... height = 6
    ... edge_length = 0.025
    ... variances = [1e-6, 1e-6, 1e-6]
    ...
    ... [camera.descriptor]
    ... type = "detector_defined"
    ... ''')
    >>> config.camera.detector.width
    8
    """
    config = decode_config(parse_config_text(text))
    check_config(config)
    return config


def load_object_space_config(path: str | Path) -> ObjectSpaceConfig:
    """
    Load an object-space configuration file.

    Parameters
    ----------
    path
        Path to TOML configuration file.

    Returns
    -------
    ObjectSpaceConfig
        Fully validated configuration.

    Raises
    ------
    ResourceError
        If the file cannot be read.
    ConfigSyntaxError
        If the file is not well-formed TOML.
    SchemaError
        If the document does not describe a valid object space.
    """
    config = load_config_text(read_config_source(path))
    logger.debug(
        f"Loaded object-space configuration from {path}: "
        f"camera detector '{config.camera.detector.TAG}', "
        f"descriptor '{config.camera.descriptor.TAG}'"
    )
    return config
