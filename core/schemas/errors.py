"""
Module 02 - Schemas & Encoding
File: errors.py

Purpose: Standard error taxonomy for whitelist commitments.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Tree & Proof Errors
    EMPTY_INPUT = "EMPTY_INPUT"
    NOT_FOUND = "NOT_FOUND"
    MALFORMED_PROOF = "MALFORMED_PROOF"

    # Identifier Errors
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"

    # Whitelist Source Errors
    SOURCE_UNAVAILABLE = "SOURCE_UNAVAILABLE"
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class WhitelistError(BaseModel):
    """
    Error model for passing failures across the API and CLI boundaries
    without exceptions.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "WhitelistException":
        """Convert this error model to a raised exception."""
        return WhitelistException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class WhitelistException(Exception):
    """
    Base exception for all whitelist commitment errors.

    Carries structured error information and can be converted
    to a WhitelistError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "WHITELIST_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> WhitelistError:
        """Convert this exception to a WhitelistError model."""
        return WhitelistError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyInputError(WhitelistException):
    """Raised when a tree is requested for zero identifiers."""

    def __init__(self, message: str = "Cannot build a Merkle tree from an empty identifier set") -> None:
        super().__init__(message=message, code=ErrorCodes.EMPTY_INPUT)


class NotFoundError(WhitelistException):
    """Raised when a proof is requested for an identifier outside the set."""

    def __init__(
        self,
        message: str = "user not in whitelist",
        identifier: str | None = None,
    ) -> None:
        details = {"identifier": identifier} if identifier is not None else {}
        super().__init__(message=message, code=ErrorCodes.NOT_FOUND, details=details)


class MalformedProofError(WhitelistException):
    """Raised when a proof entry or root has the wrong hash width."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        expected_width: int | None = None,
        actual_width: int | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if position is not None:
            details["position"] = position
        if expected_width is not None:
            details["expected_width"] = expected_width
        if actual_width is not None:
            details["actual_width"] = actual_width
        super().__init__(message=message, code=ErrorCodes.MALFORMED_PROOF, details=details)


class InvalidIdentifierError(WhitelistException):
    """Raised when an identifier cannot be normalized under the configured mode."""

    def __init__(self, message: str, identifier: str | None = None) -> None:
        details = {"identifier": identifier} if identifier is not None else {}
        super().__init__(message=message, code=ErrorCodes.INVALID_IDENTIFIER, details=details)


class SourceUnavailableError(WhitelistException):
    """Raised when the whitelist source cannot be read."""

    def __init__(
        self,
        message: str,
        location: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if location:
            full_details["location"] = location
        super().__init__(
            message=message,
            code=ErrorCodes.SOURCE_UNAVAILABLE,
            details=full_details,
            retryable=True,
        )


class SchemaValidationError(WhitelistException):
    """Raised when whitelist records violate the expected schema."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if errors:
            full_details["errors"] = errors
        super().__init__(
            message=message,
            code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
            details=full_details,
        )
