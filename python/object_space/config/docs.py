"""
Documentation generation from parameter metadata.

This module provides:
- generate_parameter_docs: Generate markdown documentation
- export_parameter_json: Export to a JSON-serialisable dict for tooling
"""

from __future__ import annotations

from typing import Any, get_type_hints

from .parameters import ParameterMetadata, get_parameter_metadata

__all__ = ["export_parameter_json", "generate_parameter_docs"]

_TYPE_NAMES = {int: "integer", float: "float", tuple[float, ...]: "array of floats"}


def _field_type(cls: type, name: str) -> str:
    return _TYPE_NAMES.get(get_type_hints(cls).get(name), "unknown")


def _constraints(meta: ParameterMetadata) -> list[str]:
    constraints = []
    if meta.positive:
        constraints.append("> 0")
    if meta.range is not None:
        min_val, max_val = meta.range
        constraints.append(f"in [{min_val}, {max_val}]")
    if meta.length is not None:
        constraints.append(f"exactly {meta.length} elements")
    if meta.item_range is not None:
        min_val, max_val = meta.item_range
        constraints.append(f"each element in [{min_val}, {max_val}]")
    return constraints


def generate_parameter_docs(cls: type) -> str:
    """Generate markdown documentation from parameter metadata.

    Parameters
    ----------
    cls : type
        A variant class with parameters defined via parameter()

    Returns
    -------
    str
        Markdown-formatted documentation

    Examples
    --------
    >>> from object_space.config.models import Charuco
    >>> md = generate_parameter_docs(Charuco)
    >>> "marker_length" in md
    True
    """
    lines = []

    # Title: wire tag when the class has one
    tag = getattr(cls, "TAG", None)
    lines.append(f"# {cls.__name__}" + (f' (`type = "{tag}"`)' if tag else ""))
    lines.append("")

    # First paragraph of the class docstring
    if cls.__doc__:
        lines.append(cls.__doc__.strip().split("\n\n")[0])
        lines.append("")

    metadata = get_parameter_metadata(cls)
    if metadata:
        lines.append("## Parameters")
        lines.append("")

        for name, meta in metadata.items():
            lines.append(f"### `{name}`")
            lines.append("")

            if meta.description:
                lines.append(meta.description)
                lines.append("")

            lines.append(f"- **Type**: {_field_type(cls, name)}")
            unit_text = meta.unit if meta.unit else "dimensionless"
            lines.append(f"- **Unit**: {unit_text}")

            constraints = _constraints(meta)
            if constraints:
                lines.append(f"- **Constraints**: {', '.join(constraints)}")

            lines.append("")

    return "\n".join(lines)


def export_parameter_json(cls: type) -> dict[str, Any]:
    """Export parameter metadata to a JSON-serialisable dict.

    Parameters
    ----------
    cls : type
        A variant class with parameters defined via parameter()

    Returns
    -------
    dict
        JSON-serializable dict with structure:
        {
            "class": str,
            "type": str | None,
            "description": str | None,
            "parameters": [
                {
                    "name": str,
                    "type": str,
                    "unit": str | None,
                    "description": str | None,
                    "constraints": [str, ...],
                }
            ]
        }

    Examples
    --------
    >>> from object_space.config.models import Checkerboard
    >>> data = export_parameter_json(Checkerboard)
    >>> data["type"]
    'checkerboard'
    >>> len(data["parameters"])
    4
    """
    metadata = get_parameter_metadata(cls)

    parameters = [
        {
            "name": name,
            "type": _field_type(cls, name),
            "unit": meta.unit,
            "description": meta.description,
            "constraints": _constraints(meta),
        }
        for name, meta in metadata.items()
    ]

    return {
        "class": cls.__name__,
        "type": getattr(cls, "TAG", None),
        "description": cls.__doc__.strip().split("\n\n")[0] if cls.__doc__ else None,
        "parameters": parameters,
    }
