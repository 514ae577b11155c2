"""Descriptor variants: how object-space coordinates of detections are defined."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

__all__ = ["DetectorDefined"]


@dataclass(frozen=True)
class DetectorDefined:
    """Object space is defined by the detector and its parameters."""

    TAG: ClassVar[str] = "detector_defined"

    def check(self) -> list[tuple[str, str]]:
        """Return ``(field, message)`` pairs for every violated constraint."""
        return []

    def to_dict(self) -> dict[str, Any]:
        """Encode as a TOML-ready table, including the ``type`` tag."""
        return {"type": self.TAG}
