"""Object-space point coordinates derived from a detector-descriptor pairing.

The board frame has its origin at the first inner corner, with X along the
board width, Y along the board height and Z = 0 on the board surface. Inner
corners are numbered row-major, so corner ``i`` lies at column
``i % (width - 1)`` and row ``i // (width - 1)``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from object_space.config.base import DetectorDescriptor
from object_space.config.models import Charuco, Checkerboard, Detector, DetectorDefined

__all__ = ["inner_corner_count", "object_points", "point_covariance"]


def inner_corner_count(detector: Detector) -> int:
    """
    Number of inner corners on a checkerboard or ChArUco board.

    Parameters
    ----------
    detector
        Board detector

    Returns
    -------
    int
        ``(width - 1) * (height - 1)``
    """
    return (detector.width - 1) * (detector.height - 1)


def _board_corners(detector: Checkerboard | Charuco) -> NDArray[np.float64]:
    cols = detector.width - 1
    rows = detector.height - 1
    ids = np.arange(cols * rows)
    points = np.zeros((cols * rows, 3), dtype=np.float64)
    points[:, 0] = (ids % cols) * detector.edge_length
    points[:, 1] = (ids // cols) * detector.edge_length
    return points


def object_points(pairing: DetectorDescriptor) -> NDArray[np.float64]:
    """
    Object-space coordinates of every feature the detector can observe.

    Parameters
    ----------
    pairing
        Detector-descriptor pairing for a component type

    Returns
    -------
    NDArray[np.float64]
        Array of shape (N, 3) in metres, indexed by feature id

    Raises
    ------
    TypeError
        If the pairing has no known object-space definition

    Examples
    --------
    >>> pairing = DetectorDescriptor(
    ...     Checkerboard(width=8, height=6, edge_length=0.03,
    ...                  variances=(1e-6, 1e-6, 1e-6)),
    ...     DetectorDefined(),
    ... )
    >>> object_points(pairing).shape
    (35, 3)
    """
    detector = pairing.detector
    if isinstance(pairing.descriptor, DetectorDefined):
        if isinstance(detector, (Checkerboard, Charuco)):
            return _board_corners(detector)
        msg = f"No detector-defined object space for {type(detector).__name__}"
        raise TypeError(msg)

    msg = f"Unsupported descriptor {type(pairing.descriptor).__name__}"
    raise TypeError(msg)


def point_covariance(detector: Detector) -> NDArray[np.float64]:
    """
    Covariance prior of a single object-space point.

    Parameters
    ----------
    detector
        Detector whose ``variances`` hold the X/Y/Z variances

    Returns
    -------
    NDArray[np.float64]
        3x3 diagonal covariance matrix in m^2
    """
    return np.diag(np.asarray(detector.variances, dtype=np.float64))
