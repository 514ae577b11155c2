"""
Top-level classes for object-space configuration.

This module defines the dataclasses that hold a decoded configuration:
- DetectorDescriptor: Detector / descriptor pairing for one component type
- ObjectSpaceConfig: The whole document (currently cameras only)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import Descriptor, Detector

__all__ = ["DetectorDescriptor", "ObjectSpaceConfig"]


@dataclass(frozen=True)
class DetectorDescriptor:
    """
    Detector / descriptor pairing for a component type.

    Not every detector is meaningful with every descriptor; each detector
    lists the descriptor types it accepts in ``DESCRIPTORS``.

    Parameters
    ----------
    detector
        The detector to use on observations from the parent component type
    descriptor
        Defines the object space observed with the detector
    """

    detector: Detector
    descriptor: Descriptor

    def check(self) -> list[tuple[str, str]]:
        """
        Check semantic constraints of the pairing and both halves.

        Returns
        -------
        list[tuple[str, str]]
            ``(relative path, message)`` pairs, empty if valid
        """
        errors = [(f"detector.{name}", msg) for name, msg in self.detector.check()]
        errors.extend(
            (f"descriptor.{name}", msg) for name, msg in self.descriptor.check()
        )
        if self.descriptor.TAG not in self.detector.DESCRIPTORS:
            errors.append(
                (
                    "descriptor.type",
                    f"descriptor '{self.descriptor.TAG}' cannot be paired with "
                    f"detector '{self.detector.TAG}'",
                )
            )
        return errors

    def to_dict(self) -> dict[str, Any]:
        """Encode as a TOML-ready table."""
        return {
            "detector": self.detector.to_dict(),
            "descriptor": self.descriptor.to_dict(),
        }


@dataclass(frozen=True)
class ObjectSpaceConfig:
    """
    Object-space configuration for every component type in a system.

    Only cameras are supported at present.

    Parameters
    ----------
    camera
        Detector / descriptor pairing for camera components
    """

    camera: DetectorDescriptor

    def check(self) -> list[tuple[str, str]]:
        """
        Check semantic constraints across the whole configuration.

        Returns
        -------
        list[tuple[str, str]]
            ``(dotted path, message)`` pairs, empty if valid
        """
        return [(f"camera.{path}", msg) for path, msg in self.camera.check()]

    def to_dict(self) -> dict[str, Any]:
        """Encode as a TOML-ready document."""
        return {"camera": self.camera.to_dict()}
