"""Unit tests for object_space.geometry."""

from __future__ import annotations

import numpy as np
import pytest

from object_space.config import (
    Charuco,
    Checkerboard,
    DetectorDefined,
    DetectorDescriptor,
)
from object_space.geometry import inner_corner_count, object_points, point_covariance


@pytest.fixture
def checkerboard() -> Checkerboard:
    return Checkerboard(
        width=4, height=3, edge_length=0.05, variances=(1e-6, 2e-6, 3e-6)
    )


class TestInnerCornerCount:
    """Tests for inner_corner_count function."""

    def test_checkerboard(self, checkerboard):
        """A 4x3 board has 3x2 inner corners."""
        assert inner_corner_count(checkerboard) == 6

    def test_single_square(self):
        """A one-square-wide board has no inner corners."""
        board = Checkerboard(width=1, height=5, edge_length=0.05, variances=(0, 0, 0))
        assert inner_corner_count(board) == 0


class TestObjectPoints:
    """Tests for object_points function."""

    def test_shape_and_dtype(self, checkerboard):
        """One row of XYZ per inner corner."""
        points = object_points(DetectorDescriptor(checkerboard, DetectorDefined()))
        assert points.shape == (6, 3)
        assert points.dtype == np.float64

    def test_row_major_layout(self, checkerboard):
        """Corners advance along X first, then Y, on the Z = 0 plane."""
        points = object_points(DetectorDescriptor(checkerboard, DetectorDefined()))
        expected = np.array(
            [
                [0.0, 0.0, 0.0],
                [0.05, 0.0, 0.0],
                [0.10, 0.0, 0.0],
                [0.0, 0.05, 0.0],
                [0.05, 0.05, 0.0],
                [0.10, 0.05, 0.0],
            ]
        )
        np.testing.assert_allclose(points, expected)

    def test_charuco_uses_edge_length(self):
        """ChArUco corners are spaced by edge_length, not marker_length."""
        board = Charuco(
            width=3,
            height=3,
            edge_length=0.04,
            marker_length=0.03,
            variances=(1e-6, 1e-6, 1e-6),
        )
        points = object_points(DetectorDescriptor(board, DetectorDefined()))
        assert points.shape == (4, 3)
        np.testing.assert_allclose(points[-1], [0.04, 0.04, 0.0])

    def test_unsupported_descriptor(self, checkerboard):
        """Descriptors without an object-space definition raise TypeError."""
        with pytest.raises(TypeError, match="Unsupported descriptor"):
            object_points(DetectorDescriptor(checkerboard, object()))


class TestPointCovariance:
    """Tests for point_covariance function."""

    def test_diagonal(self, checkerboard):
        """Variances populate the diagonal of a 3x3 matrix."""
        cov = point_covariance(checkerboard)
        np.testing.assert_array_equal(cov, np.diag([1e-6, 2e-6, 3e-6]))
