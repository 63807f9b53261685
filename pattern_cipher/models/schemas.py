from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherScheme(str, Enum):
    """Transform strategies supported by the engine."""

    PATTERN_KEY = "pattern_key"  # keyed multiplicative cipher
    SUBSTITUTE_SHIFT = "substitute_shift"  # substitution, shift, digit masking


class LetterNumbering(str, Enum):
    """Numeric encoding of letters used by the pattern-key scheme."""

    ZERO_BASED = "zero"  # A=0 ... Z=25
    ONE_BASED = "one"  # A=1 ... Z=26


class CipherOperation(str, Enum):
    """Direction of a transform."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    # Blank and missing text are rejected by the engine so the error names the operation
    text: str | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    result: str
    operation: CipherOperation
    scheme: CipherScheme
    length: int


class SchemeResponse(BaseModel):
    """Response schema for /scheme endpoint."""

    scheme: CipherScheme
    name: str
    description: str
    explanation: str
    parameters: dict[str, Any] = Field(default_factory=dict)


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
