"""Utility functions for gqlforge."""

from .validators import (
    validate_test_data,
    validate_test_flow_update,
    validate_test_result,
    validate_variables,
)

__all__ = [
    "validate_test_data",
    "validate_test_flow_update",
    "validate_test_result",
    "validate_variables",
]
