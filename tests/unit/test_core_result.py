"""Unit tests for Result types.

Tests cover:
- Success/Failure flags
- Success.error is None
- Reading Failure.value raises InvalidResultAccessError
- Pattern matching on both variants
- Immutability
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.result import Failure, InvalidResultAccessError, Success


@pytest.mark.unit
class TestSuccess:
    """Test Success variant."""

    def test_success_flags(self):
        result = Success(value=42)

        assert result.is_success is True
        assert result.is_failure is False

    def test_success_value_and_error(self):
        result = Success(value="ok")

        assert result.value == "ok"
        assert result.error is None

    def test_success_allows_none_value(self):
        """Test Success(None) is still a success (commands with no payload)."""
        result = Success(value=None)

        assert result.is_success is True
        assert result.value is None

    def test_success_is_immutable(self):
        result = Success(value=1)

        with pytest.raises(FrozenInstanceError):
            result.value = 2  # type: ignore[misc]


@pytest.mark.unit
class TestFailure:
    """Test Failure variant."""

    def test_failure_flags(self):
        result = Failure(error="boom")

        assert result.is_success is False
        assert result.is_failure is True
        assert result.error == "boom"

    def test_failure_value_access_raises(self):
        """Test reading the value of a failure is a programming error."""
        result = Failure(error="boom")

        with pytest.raises(InvalidResultAccessError) as exc_info:
            _ = result.value

        assert "boom" in str(exc_info.value)

    def test_invalid_access_error_is_runtime_error(self):
        assert issubclass(InvalidResultAccessError, RuntimeError)


@pytest.mark.unit
class TestResultPatternMatching:
    """Test structural pattern matching on Result."""

    @pytest.mark.parametrize(
        ("result", "expected"),
        [
            (Success(value=3), "value:3"),
            (Failure(error="bad"), "error:bad"),
        ],
    )
    def test_match_selects_variant(self, result, expected):
        match result:
            case Success(value=value):
                outcome = f"value:{value}"
            case Failure(error=error):
                outcome = f"error:{error}"

        assert outcome == expected
