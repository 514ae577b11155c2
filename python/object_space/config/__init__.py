"""
Object-space configuration layer.

This module provides file-based configuration of the calibration target
model, supporting:
- Strict TOML decoding: unknown keys are errors at every level
- Tagged-union dispatch on ``type`` for detectors and descriptors
- Semantic checks of target dimensions and variances
- Writing configurations back to TOML

Example:
    >>> from object_space.config import load_object_space_config
    >>> config = load_object_space_config("fixtures/checkerboard_detector.toml")
    >>> config.camera.detector.width
    8
"""

from __future__ import annotations

from .base import DetectorDescriptor, ObjectSpaceConfig
from .docs import export_parameter_json, generate_parameter_docs
from .exceptions import (
    ConfigError,
    ConfigSyntaxError,
    ResourceError,
    SchemaError,
    SchemaErrorKind,
)
from .loader import (
    decode_config,
    load_config_text,
    load_object_space_config,
    parse_config_text,
    read_config_source,
)
from .models import (
    Charuco,
    Checkerboard,
    Descriptor,
    Detector,
    DetectorDefined,
    descriptor_variants,
    detector_variants,
)
from .parameters import ParameterMetadata, get_parameter_metadata, parameter
from .validation import check_config
from .writer import dump_config_text, write_object_space_config

__all__ = [
    "Charuco",
    "Checkerboard",
    "ConfigError",
    "ConfigSyntaxError",
    "Descriptor",
    "Detector",
    "DetectorDefined",
    "DetectorDescriptor",
    "ObjectSpaceConfig",
    "ParameterMetadata",
    "ResourceError",
    "SchemaError",
    "SchemaErrorKind",
    "check_config",
    "decode_config",
    "descriptor_variants",
    "detector_variants",
    "dump_config_text",
    "export_parameter_json",
    "generate_parameter_docs",
    "get_parameter_metadata",
    "load_config_text",
    "load_object_space_config",
    "parameter",
    "parse_config_text",
    "read_config_source",
    "write_object_space_config",
]
