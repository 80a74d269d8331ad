"""
Pydantic schemas for request/response validation.
"""

from schemas.email import (
    ArchivedEmailResponse,
    DraftResponse,
    GenerateEmailRequest,
    StatusResponse,
    UpdateDraftRequest,
)

__all__ = [
    # Generation schemas
    "GenerateEmailRequest",
    "DraftResponse",
    "StatusResponse",

    # Draft editing
    "UpdateDraftRequest",

    # Archive schemas
    "ArchivedEmailResponse",
]
