"""Unit tests for the RoleName value object."""

import pytest

from src.core.constants import MAX_ROLE_NAME_LENGTH
from src.domain.value_objects import RoleName


@pytest.mark.unit
class TestRoleName:
    """Test RoleName normalization and validation."""

    def test_strips_surrounding_whitespace(self):
        assert RoleName("  refund_desk \t").value == "refund_desk"

    def test_preserves_case(self):
        assert RoleName("Refund_Desk").get_role_name() == "Refund_Desk"

    def test_str_returns_value(self):
        assert str(RoleName("auditor")) == "auditor"

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_empty_name_raises(self, raw):
        with pytest.raises(ValueError, match="cannot be empty"):
            RoleName(raw)

    def test_max_length_is_accepted(self):
        assert len(RoleName("a" * MAX_ROLE_NAME_LENGTH).value) == MAX_ROLE_NAME_LENGTH

    def test_too_long_name_raises(self):
        with pytest.raises(ValueError, match="cannot exceed"):
            RoleName("a" * (MAX_ROLE_NAME_LENGTH + 1))

    def test_is_immutable(self):
        name = RoleName("auditor")

        with pytest.raises(AttributeError):
            name.value = "other"  # type: ignore[misc]
