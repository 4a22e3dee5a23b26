"""
Schemas & Canonicalization
File: errors.py

Purpose: Standard error taxonomy for Merkle tree construction and proofs.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Argument Errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

    # Digest Provider Errors
    UNSUPPORTED_ALGORITHM = "UNSUPPORTED_ALGORITHM"

    # Serialization Errors
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Base error model for structured error reporting.

    Lets an embedding program log or serialize a failure without
    holding on to the exception object.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_ARGUMENT],
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

    def to_exception(self) -> "MerkleTreeException":
        """Convert this error model to a raisable exception."""
        return MerkleTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleTreeException(Exception):
    """
    Base exception for all merkletree errors.

    Carries structured error information and can be converted
    to a MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLETREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidArgumentException(MerkleTreeException, ValueError):
    """Raised when a digest spec, data argument or index has the wrong shape."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if argument:
            full_details["argument"] = argument
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ARGUMENT,
            details=full_details,
            retryable=False,
        )


class UnsupportedAlgorithmException(MerkleTreeException, ValueError):
    """Raised when the hash provider does not offer the named algorithm."""

    def __init__(
        self,
        message: str,
        algorithm: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if algorithm is not None:
            full_details["algorithm"] = algorithm
        super().__init__(
            message=message,
            code=ErrorCodes.UNSUPPORTED_ALGORITHM,
            details=full_details,
            retryable=False,
        )
        self.algorithm = algorithm


class IndexOutOfRangeException(MerkleTreeException, IndexError):
    """Raised when a proof is requested for a leaf that does not exist."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index is not None:
            full_details["index"] = index
        if size is not None:
            full_details["size"] = size
        super().__init__(
            message=message,
            code=ErrorCodes.INDEX_OUT_OF_RANGE,
            details=full_details,
            retryable=False,
        )
        self.index = index
        self.size = size


class CanonicalizationException(MerkleTreeException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class ConfigException(MerkleTreeException):
    """Exception raised when runtime configuration is invalid."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
            retryable=False,
        )
