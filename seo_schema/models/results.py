"""
Validation result types.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel

MISSING_REQUIRED_PROPERTY = "missing_required_property"


class SchemaViolation(BaseModel):
    """A single failed rule, located by its dotted property path."""
    code: str = MISSING_REQUIRED_PROPERTY
    path: str
    message: str
    type_name: Optional[str] = None

    @classmethod
    def missing(cls, path: str, type_name: Optional[str] = None) -> "SchemaViolation":
        return cls(
            path=path,
            message=f"missing required property: {path}",
            type_name=type_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class ValidationResult(BaseModel):
    """Either a success or the first violation found."""
    valid: bool
    error: Optional[SchemaViolation] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: SchemaViolation) -> "ValidationResult":
        return cls(valid=False, error=error)

    def __bool__(self) -> bool:
        return self.valid
