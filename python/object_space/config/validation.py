"""
Validation infrastructure for object-space configuration.

This module provides:
- Unknown and missing key detection
- Discriminator (``type`` tag) extraction for tagged unions
- Type checking and conversion of scalar and array values
- Semantic constraint checking of decoded configurations
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .exceptions import SchemaError, SchemaErrorKind

if TYPE_CHECKING:
    from .base import ObjectSpaceConfig

logger = logging.getLogger(__name__)

__all__ = [
    "check_config",
    "check_keys",
    "decode_value",
    "expect_table",
    "find_missing_keys",
    "find_unknown_keys",
    "join_path",
    "read_discriminator",
]

DISCRIMINATOR = "type"

FLOAT_ARRAY = tuple[float, ...]


def join_path(parent: str, key: str) -> str:
    """
    Append a key to a dotted path.

    Examples
    --------
    >>> join_path("camera", "detector")
    'camera.detector'
    >>> join_path("", "camera")
    'camera'
    """
    return f"{parent}.{key}" if parent else key


def toml_type_name(value: object) -> str:
    """Name the TOML type of a parsed value, for error messages."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "table"
    return "datetime"


def find_unknown_keys(data: dict[str, object], known_keys: Iterable[str]) -> list[str]:
    """
    Find keys in data that are not in the set of known keys.

    Parameters
    ----------
    data
        Dictionary to check for unknown keys.
    known_keys
        Valid/known key names.

    Returns
    -------
    list[str]
        List of keys present in data but not in known_keys, sorted alphabetically.

    Examples
    --------
    >>> find_unknown_keys({"a": 1, "b": 2}, {"a"})
    ['b']
    >>> find_unknown_keys({"a": 1}, {"a", "b", "c"})
    []
    """
    unknown = set(data.keys()) - set(known_keys)
    return sorted(unknown)


def find_missing_keys(
    data: dict[str, object], required_keys: Iterable[str]
) -> list[str]:
    """
    Find required keys that are absent from data.

    Parameters
    ----------
    data
        Dictionary to check.
    required_keys
        Keys that must be present, in declaration order.

    Returns
    -------
    list[str]
        Required keys missing from data, in declaration order.

    Examples
    --------
    >>> find_missing_keys({"a": 1}, ["a", "b", "c"])
    ['b', 'c']
    """
    return [key for key in required_keys if key not in data]


def check_keys(data: dict[str, object], expected: Iterable[str], path: str) -> None:
    """
    Require that data has exactly the expected keys.

    Missing keys are reported before unknown keys; only the first offending
    key is raised.

    Parameters
    ----------
    data
        Table to check.
    expected
        The complete set of keys the table must have.
    path
        Dotted path of the table.

    Raises
    ------
    SchemaError
        With kind ``MISSING_FIELD`` or ``UNKNOWN_FIELD``.
    """
    expected = list(expected)

    missing = find_missing_keys(data, expected)
    if missing:
        raise SchemaError(
            SchemaErrorKind.MISSING_FIELD, join_path(path, missing[0]), missing[0]
        )

    unknown = find_unknown_keys(data, expected)
    if unknown:
        allowed = ", ".join(f"'{k}'" for k in expected)
        raise SchemaError(
            SchemaErrorKind.UNKNOWN_FIELD,
            join_path(path, unknown[0]),
            f"{unknown[0]}, expected one of {allowed}",
        )


def expect_table(value: Any, path: str) -> dict[str, Any]:
    """
    Require that a value is a TOML table.

    Raises
    ------
    SchemaError
        With kind ``TYPE_MISMATCH`` if value is not a table.
    """
    if not isinstance(value, dict):
        raise SchemaError(
            SchemaErrorKind.TYPE_MISMATCH,
            path,
            f"expected table, got {toml_type_name(value)}",
        )
    return value


def read_discriminator(data: dict[str, Any], union: str, path: str) -> str:
    """
    Read the ``type`` tag of a tagged-union table.

    Parameters
    ----------
    data
        The table holding the tag.
    union
        Name of the union (e.g. "detector"), for error messages.
    path
        Dotted path of the table.

    Returns
    -------
    str
        The raw tag, not yet checked against the known variants.

    Raises
    ------
    SchemaError
        With kind ``MISSING_DISCRIMINATOR`` if the tag is absent or not a string.
    """
    tag_path = join_path(path, DISCRIMINATOR)
    if DISCRIMINATOR not in data:
        raise SchemaError(
            SchemaErrorKind.MISSING_DISCRIMINATOR,
            tag_path,
            f"'{DISCRIMINATOR}' key selecting the {union} variant is required",
        )

    tag = data[DISCRIMINATOR]
    if not isinstance(tag, str):
        raise SchemaError(
            SchemaErrorKind.MISSING_DISCRIMINATOR,
            tag_path,
            f"'{DISCRIMINATOR}' must be a string naming the {union} variant, "
            f"got {toml_type_name(tag)}",
        )
    return tag


def _type_mismatch(path: str, expected: str, value: object) -> SchemaError:
    return SchemaError(
        SchemaErrorKind.TYPE_MISMATCH,
        path,
        f"expected {expected}, got {toml_type_name(value)}",
    )


def _decode_float(value: Any, path: str) -> float:
    # TOML integers are accepted where a float is expected
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _type_mismatch(path, "float", value)
    return float(value)


def decode_value(value: Any, annotation: Any, path: str) -> Any:
    """
    Convert a parsed TOML value to the type of a schema field.

    Parameters
    ----------
    value
        Value from the parsed TOML tree.
    annotation
        Resolved field annotation: ``int``, ``float`` or ``tuple[float, ...]``.
    path
        Dotted path of the field.

    Returns
    -------
    Any
        The converted value.

    Raises
    ------
    SchemaError
        With kind ``TYPE_MISMATCH`` if value has the wrong shape.
    TypeError
        If the annotation is not a supported field type.
    """
    if annotation is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _type_mismatch(path, "integer", value)
        return value

    if annotation is float:
        return _decode_float(value, path)

    if annotation == FLOAT_ARRAY:
        if not isinstance(value, list):
            raise _type_mismatch(path, "array of floats", value)
        return tuple(
            _decode_float(item, f"{path}[{i}]") for i, item in enumerate(value)
        )

    msg = f"Unsupported field type {annotation!r} at '{path}'"
    raise TypeError(msg)


def check_config(config: ObjectSpaceConfig) -> None:
    """
    Check semantic constraints of a structurally valid configuration.

    Parameters
    ----------
    config
        Decoded configuration.

    Raises
    ------
    SchemaError
        With kind ``INVALID_VALUE`` for the first violated constraint.
    """
    errors = config.check()
    for path, msg in errors[1:]:
        logger.debug(f"Additional constraint violation at '{path}': {msg}")
    if errors:
        path, msg = errors[0]
        raise SchemaError(SchemaErrorKind.INVALID_VALUE, path, msg)
