"""
Variant tables for tagged unions in object-space configuration.

A tagged union block carries a ``type`` key whose string value selects one of
a fixed set of variant classes. Each union is described by a ``VariantTable``
that is populated once at import time and cannot be extended afterwards.

Example:
    >>> from object_space.config.models import detector_variants
    >>> detector_variants.get("checkerboard", "camera.detector.type")
    <class 'object_space.config.models.detectors.Checkerboard'>
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .exceptions import SchemaError, SchemaErrorKind

__all__ = ["VariantTable"]


class VariantTable:
    """
    Closed mapping from wire tags to variant classes.

    Parameters
    ----------
    name
        Name of the union, used in error messages (e.g. "detector").
    variants
        Mapping of wire tag to variant class.

    Example:
        >>> table = VariantTable("descriptor", {"detector_defined": DetectorDefined})
        >>> table.tags()
        ['detector_defined']
    """

    def __init__(self, name: str, variants: Mapping[str, type]) -> None:
        """Freeze the variant set."""
        self.name = name
        self._variants = MappingProxyType(dict(variants))

    def get(self, tag: str, path: str) -> type:
        """
        Get the variant class for a tag.

        Parameters
        ----------
        tag
            Wire tag read from the ``type`` key. Matching is case-sensitive.
        path
            Dotted path of the ``type`` key, for error reporting.

        Returns
        -------
        type
            Variant class associated with the tag.

        Raises
        ------
        SchemaError
            If the tag is not one of the known variants.
        """
        if tag not in self._variants:
            available = ", ".join(f"'{t}'" for t in self.tags())
            raise SchemaError(
                SchemaErrorKind.UNKNOWN_VARIANT,
                path,
                f"'{tag}' is not a known {self.name} type; expected one of {available}",
            )
        return self._variants[tag]

    def tags(self) -> list[str]:
        """
        List all known tags.

        Returns
        -------
        list[str]
            Sorted list of wire tags.
        """
        return sorted(self._variants.keys())

    def variants(self) -> list[type]:
        """
        List all variant classes, in declaration order.

        Returns
        -------
        list[type]
            Variant classes.
        """
        return list(self._variants.values())
