"""Validation utilities for L20n resources.

This module provides standalone validation functions for L20n resources,
separated from the parser for better modularity and testability.

Python 3.13+.
"""

from l20nlexengine.validation.resource import (
    validate_resource,
)

__all__ = [
    "validate_resource",
]
