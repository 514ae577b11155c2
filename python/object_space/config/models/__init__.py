"""
Variant classes for the tagged unions in an object-space configuration.

This package contains:
- detectors: calibration targets (``Checkerboard``, ``Charuco``)
- descriptors: object-space definitions (``DetectorDefined``)

The variant sets are closed; ``detector_variants`` and ``descriptor_variants``
map wire tags to the classes above.
"""

from __future__ import annotations

from object_space.config.models.descriptors import DetectorDefined
from object_space.config.models.detectors import Charuco, Checkerboard
from object_space.config.registry import VariantTable

__all__ = [
    "Charuco",
    "Checkerboard",
    "Descriptor",
    "Detector",
    "DetectorDefined",
    "descriptor_variants",
    "detector_variants",
]

Detector = Checkerboard | Charuco
Descriptor = DetectorDefined

detector_variants = VariantTable(
    "detector",
    {Checkerboard.TAG: Checkerboard, Charuco.TAG: Charuco},
)

descriptor_variants = VariantTable(
    "descriptor",
    {DetectorDefined.TAG: DetectorDefined},
)
