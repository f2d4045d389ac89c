"""
Schemas Package

JSON schema definition and validation for persisted question records.
"""

from .validator import (
    validate_record,
    ValidationError,
    RECORD_SCHEMA_NAME,
)

__all__ = [
    "validate_record",
    "ValidationError",
    "RECORD_SCHEMA_NAME",
]
