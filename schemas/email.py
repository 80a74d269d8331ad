"""
Pydantic schemas for the email generation and archive API.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from campaign.models import ArchivedEmail, EmailDraft, GenerationStatus
from generation.models import GenerationRequest, Language
from generation.utils import count_recipients


# ===================================================================
# REQUEST SCHEMAS
# ===================================================================

class GenerateEmailRequest(BaseModel):
    """
    Request body for POST /api/email/generate

    Blank product details are reported by the generator as a 400 with a
    localized message rather than a 422, so no min_length here.
    """

    product_description: str = Field(
        ...,
        max_length=5000,
        description="Description of the digital product"
    )

    product_url: str = Field(
        ...,
        max_length=2000,
        description="Link to the product listing"
    )

    language: Optional[Language] = Field(
        None,
        description="ar or en-US (defaults to the configured language)"
    )

    mailing_list: Optional[str] = Field(
        None,
        max_length=100_000,
        description="Recipient addresses separated by newlines, commas or semicolons"
    )

    recipient_count: Optional[int] = Field(
        None,
        ge=0,
        description="Overrides the count derived from mailing_list"
    )

    recipient_title: Optional[str] = Field(
        None,
        max_length=100,
        description="Title for the salutation (e.g. 'السيد', 'الدكتور')"
    )

    custom_prompt: Optional[str] = Field(
        None,
        max_length=10_000,
        description="Custom prompt with {{productDescription}} and {{productUrl}} placeholders"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "product_description": "Digital file - battery storage box design - CNC & Glowforge ready",
                "product_url": "https://www.etsy.com/listing/123456789",
                "language": "en-US",
                "mailing_list": "a@example.com, b@example.com",
                "recipient_title": "الدكتور"
            }
        }
    )

    def to_generation_request(self, default_language: Language) -> GenerationRequest:
        recipient_count = self.recipient_count
        if recipient_count is None and self.mailing_list is not None:
            recipient_count = count_recipients(self.mailing_list)

        return GenerationRequest(
            product_description=self.product_description,
            product_url=self.product_url,
            language=self.language or default_language,
            recipient_count=recipient_count,
            recipient_title=self.recipient_title,
            custom_prompt_template=self.custom_prompt,
        )


class UpdateDraftRequest(BaseModel):
    """Request body for PUT /api/email/draft"""

    subject: str = Field(..., max_length=500)
    body: str = Field(..., max_length=20_000)


# ===================================================================
# RESPONSE SCHEMAS
# ===================================================================

class DraftResponse(BaseModel):
    """The current editable draft."""

    subject: str
    body: str
    language: Language
    product_description: str
    product_url: str
    recipient_count: Optional[int] = None
    recipient_title: Optional[str] = None
    generated_at: datetime
    edited: bool

    @classmethod
    def from_draft(cls, draft: EmailDraft) -> "DraftResponse":
        request = draft.request
        return cls(
            subject=draft.subject,
            body=draft.body,
            language=request.language,
            product_description=request.product_description,
            product_url=request.product_url,
            recipient_count=request.recipient_count,
            recipient_title=request.recipient_title,
            generated_at=draft.generated_at,
            edited=draft.edited,
        )


class StatusResponse(BaseModel):
    """Response from GET /api/email/status"""

    status: GenerationStatus
    has_draft: bool
    error: Optional[str] = Field(None, description="Localized message of the last failure")
    archive_size: int


class ArchivedEmailResponse(ArchivedEmail):
    """An archived email as returned by the archive endpoints."""

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "2025-06-01T10:30:00.123456+00:00",
                "subject": "Organize your batteries in style",
                "body": "Hi there,\nMeet our laser-ready battery box...",
                "product_description": "Digital file - battery storage box design",
                "product_url": "https://www.etsy.com/listing/123456789",
                "timestamp": "2025-06-01T10:31:12.000000+00:00",
                "language": "en-US",
                "recipient_title": None
            }
        }
    )
