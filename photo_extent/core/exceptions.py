"""Unified exception taxonomy for the extent engine.

Every domain exception inherits from ``ExtentError`` and carries
structured context fields so that callers can branch on the failure
kind (skip the photo set, abort, re-ingest) instead of interpreting a
default value as a real answer.

Taxonomy categories
-------------------
- ``ValidationError``: input/contract violations in angles or point sets.
- ``PermanentError``: arithmetic or geometric failures for valid input.
- ``ContractError``: ingestion records that do not match the schema.

Nothing in the engine is retried internally, so every category is
non-retryable by default.  ``retryable`` is still exposed so that an
ingestion collaborator can attach its own retry decision.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class ExtentError(Exception):
    """Base exception for all extent-engine errors.

    Attributes:
        message: Human-readable error description.
        stage: Engine stage where the error occurred
            (e.g. ``"extent_tracker"``, ``"sexagesimal_delta"``).
        code: Machine-readable error code (e.g. ``"EMPTY_INPUT"``).
        retryable: Whether the caller may sensibly retry the operation.
        correlation_id: Caller-supplied run identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ExtentError):
    """Input or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(ExtentError):
    """Unrecoverable computation failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(ExtentError):
    """Ingestion record does not match the expected schema. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
