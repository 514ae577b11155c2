"""
Unit tests for object_space.config.validation module.

Tests key-set checks, discriminator extraction, value decoding and
semantic checks of decoded configurations.
"""

from __future__ import annotations

import logging

import pytest

from object_space.config import (
    Charuco,
    Checkerboard,
    DetectorDefined,
    DetectorDescriptor,
    ObjectSpaceConfig,
    SchemaError,
    SchemaErrorKind,
)
from object_space.config.validation import (
    check_config,
    check_keys,
    decode_value,
    expect_table,
    find_missing_keys,
    find_unknown_keys,
    join_path,
    read_discriminator,
)


class TestJoinPath:
    """Tests for join_path function."""

    def test_join_root(self):
        """join_path with an empty parent returns the key."""
        assert join_path("", "camera") == "camera"

    def test_join_nested(self):
        """join_path joins with a dot."""
        assert join_path("camera.detector", "width") == "camera.detector.width"


class TestFindKeys:
    """Tests for find_unknown_keys and find_missing_keys functions."""

    def test_find_unknown_keys_none(self):
        """find_unknown_keys returns empty list when all keys are known."""
        assert find_unknown_keys({"a": 1, "b": 2}, {"a", "b", "c"}) == []

    def test_find_unknown_keys_sorted(self):
        """find_unknown_keys returns unknown keys sorted alphabetically."""
        data = {"zebra": 1, "known": 2, "alpha": 3}
        assert find_unknown_keys(data, ["known"]) == ["alpha", "zebra"]

    def test_find_missing_keys_declaration_order(self):
        """find_missing_keys keeps the order of required keys."""
        assert find_missing_keys({"b": 1}, ["c", "b", "a"]) == ["c", "a"]

    def test_find_missing_keys_empty_data(self):
        """find_missing_keys on empty data returns every required key."""
        assert find_missing_keys({}, ["camera"]) == ["camera"]


class TestCheckKeys:
    """Tests for check_keys function."""

    def test_exact_keys_pass(self):
        """check_keys accepts exactly the expected keys."""
        data = {"detector": {}, "descriptor": {}}
        check_keys(data, ["detector", "descriptor"], "camera")

    def test_missing_reported_before_unknown(self):
        """A missing key is reported even when unknown keys are present."""
        with pytest.raises(SchemaError) as excinfo:
            check_keys({"package": {}}, ["camera"], "")
        assert excinfo.value.kind is SchemaErrorKind.MISSING_FIELD
        assert str(excinfo.value) == "missing field: camera (at 'camera')"

    def test_unknown_key(self):
        """An unknown key is named with its full path."""
        with pytest.raises(SchemaError) as excinfo:
            check_keys({"a": 1, "foo": 2}, ["a"], "camera.detector")
        assert excinfo.value.kind is SchemaErrorKind.UNKNOWN_FIELD
        assert excinfo.value.path == "camera.detector.foo"
        assert "expected one of 'a'" in str(excinfo.value)


class TestExpectTable:
    """Tests for expect_table function."""

    def test_table_returned(self):
        """expect_table returns dicts unchanged."""
        data = {"a": 1}
        assert expect_table(data, "camera") is data

    @pytest.mark.parametrize(
        ("value", "name"),
        [(1, "integer"), ("x", "string"), ([1], "array"), (True, "boolean")],
    )
    def test_non_table(self, value, name):
        """expect_table names the TOML type it got."""
        with pytest.raises(SchemaError, match=f"expected table, got {name}"):
            expect_table(value, "camera")


class TestReadDiscriminator:
    """Tests for read_discriminator function."""

    def test_read_tag(self):
        """read_discriminator returns the raw tag."""
        assert read_discriminator({"type": "charuco"}, "detector", "d") == "charuco"

    def test_missing_tag(self):
        """An absent tag raises MISSING_DISCRIMINATOR."""
        with pytest.raises(
            SchemaError, match="selecting the detector variant"
        ) as excinfo:
            read_discriminator({"width": 8}, "detector", "camera.detector")
        assert excinfo.value.kind is SchemaErrorKind.MISSING_DISCRIMINATOR
        assert excinfo.value.path == "camera.detector.type"

    def test_non_string_tag(self):
        """A non-string tag raises MISSING_DISCRIMINATOR."""
        with pytest.raises(SchemaError, match="got array") as excinfo:
            read_discriminator({"type": ["charuco"]}, "detector", "camera.detector")
        assert excinfo.value.kind is SchemaErrorKind.MISSING_DISCRIMINATOR


class TestDecodeValue:
    """Tests for decode_value function."""

    def test_integer(self):
        """Integers decode unchanged."""
        assert decode_value(8, int, "w") == 8

    def test_float_from_int(self):
        """Integers convert to float for float fields."""
        value = decode_value(2, float, "e")
        assert value == 2.0
        assert isinstance(value, float)

    def test_float_array(self):
        """Arrays decode to tuples of floats."""
        assert decode_value([1, 2.5, 0], tuple[float, ...], "v") == (1.0, 2.5, 0.0)

    def test_bool_for_float(self):
        """Booleans are rejected for float fields."""
        with pytest.raises(SchemaError, match="expected float, got boolean"):
            decode_value(True, float, "e")

    def test_unsupported_annotation(self):
        """Unsupported annotations are a programming error."""
        with pytest.raises(TypeError, match="Unsupported field type"):
            decode_value("x", str, "name")


def _config(detector, descriptor=None) -> ObjectSpaceConfig:
    return ObjectSpaceConfig(
        camera=DetectorDescriptor(
            detector=detector, descriptor=descriptor or DetectorDefined()
        )
    )


class TestCheckConfig:
    """Tests for check_config function."""

    def test_valid_config(self):
        """check_config accepts a valid configuration."""
        check_config(
            _config(
                Checkerboard(
                    width=8, height=6, edge_length=0.025, variances=(1e-6, 1e-6, 1e-6)
                )
            )
        )

    def test_first_error_raised(self, caplog):
        """check_config raises the first violation and logs the rest."""
        board = Charuco(
            width=0,
            height=6,
            edge_length=0.04,
            marker_length=0.05,
            variances=(1e-6, 1e-6, 1e-6),
        )
        with caplog.at_level(logging.DEBUG, logger="object_space.config.validation"):
            with pytest.raises(SchemaError) as excinfo:
                check_config(_config(board))

        assert excinfo.value.kind is SchemaErrorKind.INVALID_VALUE
        assert excinfo.value.path == "camera.detector.width"
        assert "camera.detector.marker_length" in caplog.text

    def test_incompatible_descriptor(self):
        """A descriptor not listed by the detector is rejected."""

        class Unpaired(DetectorDefined):
            TAG = "unpaired"

        board = Checkerboard(
            width=8, height=6, edge_length=0.025, variances=(1e-6, 1e-6, 1e-6)
        )
        with pytest.raises(SchemaError, match="cannot be paired") as excinfo:
            check_config(_config(board, Unpaired()))
        assert excinfo.value.path == "camera.descriptor.type"
