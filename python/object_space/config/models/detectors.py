"""
Detector variants for camera observations.

A detector names the calibration target found in an image and carries the
target's physical parameters. Each variant lists the descriptor types it can
meaningfully be paired with in ``DESCRIPTORS``.

Example
-------
    >>> from object_space.config.models.detectors import Checkerboard
    >>> board = Checkerboard(
    ...     width=8, height=6, edge_length=0.025, variances=(1e-6, 1e-6, 1e-6)
    ... )
    >>> board.check()
    []
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar

from object_space.config.parameters import parameter, validate_parameters

__all__ = ["Charuco", "Checkerboard"]

_NON_NEGATIVE = (0.0, math.inf)


@dataclass(frozen=True)
class Checkerboard:
    """Detector for a checkerboard within a camera image.

    Attributes
    ----------
    width : int
        Number of checker squares horizontally on the board
    height : int
        Number of checker squares vertically on the board
    edge_length : float
        Size of one edge of a checker square (m)
    variances : tuple[float, ...]
        Variances (X/Y/Z) of object-space points (m^2)
    """

    TAG: ClassVar[str] = "checkerboard"
    DESCRIPTORS: ClassVar[tuple[str, ...]] = ("detector_defined",)

    width: int = parameter(
        description="Number of checker squares horizontally on the board",
        positive=True,
    )

    height: int = parameter(
        description="Number of checker squares vertically on the board",
        positive=True,
    )

    edge_length: float = parameter(
        unit="m",
        description="Size of one edge of a checker square",
        positive=True,
    )

    variances: tuple[float, ...] = parameter(
        unit="m^2",
        description="Variances (X/Y/Z) of object-space points",
        length=3,
        item_range=_NON_NEGATIVE,
    )

    def __post_init__(self) -> None:
        """Store variances as a tuple."""
        object.__setattr__(self, "variances", tuple(self.variances))

    def check(self) -> list[tuple[str, str]]:
        """Return ``(field, message)`` pairs for every violated constraint."""
        return validate_parameters(self)

    def to_dict(self) -> dict[str, Any]:
        """Encode as a TOML-ready table, including the ``type`` tag."""
        return {
            "type": self.TAG,
            "width": self.width,
            "height": self.height,
            "edge_length": self.edge_length,
            "variances": list(self.variances),
        }


@dataclass(frozen=True)
class Charuco:
    """Detector for a ChArUco board within a camera image.

    Attributes
    ----------
    width : int
        Number of checker squares horizontally on the board
    height : int
        Number of checker squares vertically on the board
    edge_length : float
        Size of one edge of a checker square (m)
    marker_length : float
        Size of one edge of the ArUco markers (m); smaller than ``edge_length``
    variances : tuple[float, ...]
        Variances (X/Y/Z) of object-space points (m^2)
    """

    TAG: ClassVar[str] = "charuco"
    DESCRIPTORS: ClassVar[tuple[str, ...]] = ("detector_defined",)

    width: int = parameter(
        description="Number of checker squares horizontally on the board",
        positive=True,
    )

    height: int = parameter(
        description="Number of checker squares vertically on the board",
        positive=True,
    )

    edge_length: float = parameter(
        unit="m",
        description="Size of one edge of a checker square",
        positive=True,
    )

    marker_length: float = parameter(
        unit="m",
        description="Size of one edge of the ArUco markers. Must be smaller "
        "than edge_length.",
        positive=True,
    )

    variances: tuple[float, ...] = parameter(
        unit="m^2",
        description="Variances (X/Y/Z) of object-space points",
        length=3,
        item_range=_NON_NEGATIVE,
    )

    def __post_init__(self) -> None:
        """Store variances as a tuple."""
        object.__setattr__(self, "variances", tuple(self.variances))

    def check(self) -> list[tuple[str, str]]:
        """Return ``(field, message)`` pairs for every violated constraint."""
        errors = validate_parameters(self)
        if not self.marker_length < self.edge_length:
            errors.append(
                (
                    "marker_length",
                    f"marker_length ({self.marker_length}) must be less than "
                    f"edge_length ({self.edge_length})",
                )
            )
        return errors

    def to_dict(self) -> dict[str, Any]:
        """Encode as a TOML-ready table, including the ``type`` tag."""
        return {
            "type": self.TAG,
            "width": self.width,
            "height": self.height,
            "edge_length": self.edge_length,
            "marker_length": self.marker_length,
            "variances": list(self.variances),
        }
