"""
Parameter metadata system for object-space configuration.

This module provides structured parameter metadata that can be:
- Checked after a configuration has been decoded
- Aggregated into documentation automatically
- Exported to JSON for tooling

Example:
    >>> from dataclasses import dataclass
    >>> from object_space.config.parameters import parameter, validate_parameters
    >>>
    >>> @dataclass(frozen=True)
    >>> class Board:
    ...     edge_length: float = parameter(unit="m", positive=True)
    >>>
    >>> validate_parameters(Board(edge_length=-1.0))
    [('edge_length', 'must be greater than 0 (got -1.0)')]
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import MISSING, dataclass, field, fields
from typing import Any

__all__ = [
    "ParameterMetadata",
    "get_parameter_metadata",
    "parameter",
    "validate_parameters",
]


@dataclass
class ParameterMetadata:
    """Metadata for a single parameter in a configuration dataclass.

    Attributes
    ----------
    name : str
        Parameter name
    unit : str | None
        Physical unit (e.g., "m", "m^2")
    description : str | None
        Human-readable description
    range : tuple[float, float] | None
        Hard validation range (min, max), inclusive at both ends
    positive : bool
        Whether the value must be strictly greater than zero
    length : int | None
        Exact number of elements required for sequence parameters
    item_range : tuple[float, float] | None
        Inclusive range each element of a sequence parameter must lie in
    """

    name: str
    unit: str | None = None
    description: str | None = None
    range: tuple[float, float] | None = None
    positive: bool = False
    length: int | None = None
    item_range: tuple[float, float] | None = None


def parameter(  # noqa: PLR0913
    default: Any = MISSING,
    unit: str | None = None,
    description: str | None = None,
    range: tuple[float, float] | None = None,
    positive: bool = False,
    length: int | None = None,
    item_range: tuple[float, float] | None = None,
) -> Any:
    """Create a dataclass field with parameter metadata.

    Parameters
    ----------
    default : Any
        Default value for the parameter. If not provided, field is required.
    unit : str | None
        Physical unit
    description : str | None
        Human-readable description
    range : tuple[float, float] | None
        Hard validation range (min, max)
    positive : bool
        Require the value to be strictly positive
    length : int | None
        Exact sequence length
    item_range : tuple[float, float] | None
        Hard validation range for every sequence element

    Returns
    -------
    Any
        A dataclass field with parameter metadata attached
    """
    metadata = {
        "param": ParameterMetadata(
            name="",  # Will be filled in by get_parameter_metadata
            unit=unit,
            description=description,
            range=range,
            positive=positive,
            length=length,
            item_range=item_range,
        )
    }

    if default is MISSING:
        return field(metadata=metadata)
    return field(default=default, metadata=metadata)


def get_parameter_metadata(cls: type) -> dict[str, ParameterMetadata]:
    """Extract parameter metadata from a dataclass.

    Parameters
    ----------
    cls : type
        A dataclass type with parameters defined via parameter()

    Returns
    -------
    dict[str, ParameterMetadata]
        Mapping from parameter name to metadata, in field order

    Examples
    --------
    >>> from object_space.config.models import Checkerboard
    >>> get_parameter_metadata(Checkerboard)["edge_length"].unit
    'm'
    """
    result = {}
    for f in fields(cls):
        if "param" in f.metadata:
            meta = f.metadata["param"]
            # Fill in the name from the field
            meta.name = f.name
            result[f.name] = meta
    return result


def validate_parameters(instance: Any) -> list[tuple[str, str]]:
    """Validate parameter values against metadata.

    Parameters
    ----------
    instance : Any
        An instance of a dataclass with parameter metadata

    Returns
    -------
    list[tuple[str, str]]
        ``(parameter name, message)`` pairs, in field order (empty if valid)
    """
    errors = []
    metadata = get_parameter_metadata(type(instance))

    for name, meta in metadata.items():
        value = getattr(instance, name)

        if meta.positive and not value > 0:
            errors.append((name, f"must be greater than 0 (got {value})"))

        if meta.range is not None:
            min_val, max_val = meta.range
            if not min_val <= value <= max_val:
                errors.append(
                    (
                        name,
                        f"value {value} is outside valid range [{min_val}, {max_val}]",
                    )
                )

        if isinstance(value, Sequence):
            if meta.length is not None and len(value) != meta.length:
                errors.append(
                    (
                        name,
                        f"must have exactly {meta.length} elements "
                        f"(got {len(value)})",
                    )
                )

            if meta.item_range is not None:
                min_val, max_val = meta.item_range
                for i, item in enumerate(value):
                    if not min_val <= item <= max_val:
                        errors.append(
                            (
                                name,
                                f"element {i} value {item} is outside valid range "
                                f"[{min_val}, {max_val}]",
                            )
                        )

    return errors
