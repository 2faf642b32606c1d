"""
Validation Framework for the Station Map.

This module provides geometric consistency checks.
"""

from validation.consistency_checks import (
    GeometryConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "GeometryConsistencyChecker",
    "ValidationResult",
]
