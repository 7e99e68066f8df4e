"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and form cross-layer contracts
within that domain (interfaces → services → workflows → components → persistence).

Rules for DTO modules:
- Import only stdlib and typing (no folio.* imports)
- Contain ONLY dataclass/enum/type definitions and simple type aliases
- No I/O, no business logic
"""

from .config_dto import StorageConfig
from .content_dto import DocumentSummary
from .normalization_dto import (
    Normalized,
    NormalizeResult,
    RawFields,
    RawValue,
    Rejected,
    Rejection,
    RejectionCode,
)
from .submission_dto import PATCHABLE_STATUSES, SUBMISSION_FIELDS, SubmissionStatus

__all__ = [
    "PATCHABLE_STATUSES",
    "SUBMISSION_FIELDS",
    "DocumentSummary",
    "NormalizeResult",
    "Normalized",
    "RawFields",
    "RawValue",
    "Rejected",
    "Rejection",
    "RejectionCode",
    "StorageConfig",
    "SubmissionStatus",
]
