"""Validators package exports."""

from src.domain.validators.role_validators import validate_role_groups

__all__ = ["validate_role_groups"]
