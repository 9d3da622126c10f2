"""Structural checks for produced page documents."""

from pagetree.validation.rules import ALL_RULES
from pagetree.validation.validator import ValidationError, validate, validate_or_raise

__all__ = ["ALL_RULES", "ValidationError", "validate", "validate_or_raise"]
