"""Data models for a campaign session: state machine, draft and archive."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Deque, Optional, Tuple

from pydantic import ConfigDict, Field

from generation.models import GeneratedEmail, GenerationRequest, Language


# Transitions kept on CampaignState.history
HISTORY_LIMIT = 20


class GenerationStatus(str, Enum):
    """Caller-visible state of the last generate() call."""
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ArchivedEmail(GeneratedEmail):
    """
    An archived email plus the campaign details it was generated for.

    Created once per archive action and never mutated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(description="Unique id derived from the generation time")
    product_description: str
    product_url: str
    timestamp: datetime = Field(description="When the email was archived (UTC)")
    language: Language
    recipient_title: Optional[str] = None


@dataclass
class EmailDraft:
    """
    Editable working copy of the last generated email.

    Not persisted. Cleared when archived or discarded.
    """

    subject: str
    body: str

    request: GenerationRequest
    """The request the email was generated from (campaign details)"""

    generated_at: datetime
    """When Gemini returned the email, used to derive the archive id"""

    edited: bool = False

    def to_email(self) -> GeneratedEmail:
        return GeneratedEmail(subject=self.subject, body=self.body)


@dataclass
class CampaignState:
    """
    In-memory state of one campaign session, owned by CampaignController.
    """

    status: GenerationStatus = GenerationStatus.IDLE

    draft: Optional[EmailDraft] = None

    error_message: Optional[str] = None
    """Localized message of the last failure, cleared by the next call"""

    history: Deque[Tuple[GenerationStatus, GenerationStatus]] = field(
        default_factory=lambda: deque(maxlen=HISTORY_LIMIT)
    )
    """Most recent status transitions, oldest first"""

    @property
    def is_busy(self) -> bool:
        return self.status == GenerationStatus.PENDING

    def transition(self, status: GenerationStatus) -> None:
        self.history.append((self.status, status))
        self.status = status
