"""
Campaign session: generation state, editable draft and archive.
"""

from campaign.controller import CampaignController
from campaign.exceptions import DuplicateArchiveError, NoDraftError, SessionBusyError
from campaign.models import ArchivedEmail, EmailDraft, GenerationStatus
from campaign.store import ArchiveStore, InMemoryArchiveStore

__all__ = [
    "ArchiveStore",
    "ArchivedEmail",
    "CampaignController",
    "DuplicateArchiveError",
    "EmailDraft",
    "GenerationStatus",
    "InMemoryArchiveStore",
    "NoDraftError",
    "SessionBusyError",
]
