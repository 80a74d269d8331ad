"""
Generation Models

Pydantic models for the generation request and the email returned by Gemini.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Language(str, Enum):
    """Language the email (and its prompt) is written in."""
    AR = "ar"
    EN_US = "en-US"


class GenerationRequest(BaseModel):
    """
    Everything the prompt builder needs for one email.

    Blank description/URL are accepted here on purpose; EmailGenerator.generate
    rejects them with a localized ValidationError before any request.
    """

    model_config = ConfigDict(frozen=True)

    product_description: str = Field(
        description="Free-text description of the digital product"
    )

    product_url: str = Field(
        description="Link to the product listing"
    )

    language: Language = Field(
        default=Language.AR,
        description="Output language: ar or en-US"
    )

    recipient_count: Optional[int] = Field(
        default=None,
        description="Number of recipients, drives the grammatical number of the address"
    )

    recipient_title: Optional[str] = Field(
        default=None,
        description="Title used in the salutation (e.g. 'السيد', 'Dr.')"
    )

    custom_prompt_template: Optional[str] = Field(
        default=None,
        description="Caller-supplied prompt with {{productDescription}} / {{productUrl}} placeholders"
    )

    @property
    def has_custom_template(self) -> bool:
        return bool(self.custom_prompt_template and self.custom_prompt_template.strip())


class GeneratedEmail(BaseModel):
    """
    Email returned by Gemini.

    This is also the response schema sent to the model: an object with the
    required string properties subject and body and nothing else. Extra keys
    in a reply are ignored rather than rejected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={"additionalProperties": False},
    )

    subject: str = Field(
        description="Catchy subject line of the email"
    )

    body: str = Field(
        description="Full email body as a single text value, using \\n for line breaks"
    )

    @field_validator("subject", "body", mode="before")
    @classmethod
    def require_string(cls, v):
        """Reject numbers, lists, etc. instead of coercing them"""
        if not isinstance(v, str):
            raise ValueError("must be a string")
        return v

    @field_validator("subject", "body")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure subject and body are non-empty after stripping"""
        if not v.strip():
            raise ValueError("cannot be empty")
        return v
