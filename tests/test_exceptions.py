"""Tests for exception types."""

import pytest

from tunnel_update.common.exceptions import (
    ConfigurationError,
    TunnelMismatchError,
    TunnelUpdateError,
    ValidationError,
    Violation,
)


class TestExceptionHierarchy:
    def test_all_errors_share_base(self):
        """Test that package errors derive from TunnelUpdateError"""
        for error_cls in (ValidationError, ConfigurationError, TunnelMismatchError):
            assert issubclass(error_cls, TunnelUpdateError)


class TestValidationError:
    def test_keeps_every_violation(self):
        """Test that all violations are carried in order"""
        error = ValidationError(
            [Violation("id", "id required"), Violation("name", "name required")]
        )

        assert error.fields == ["id", "name"]
        assert str(error) == "id: id required; name: name required"

    def test_to_dict(self):
        """Test structured error body"""
        error = ValidationError([Violation("trafficRatio", "trafficRatio out of range")])

        assert error.to_dict() == {
            "message": "tunnel update request is invalid",
            "violations": [
                {"field": "trafficRatio", "message": "trafficRatio out of range"}
            ],
        }

    def test_requires_violations(self):
        """Test that an empty violation list is refused"""
        with pytest.raises(ValueError):
            ValidationError([])
