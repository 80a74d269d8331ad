"""
Campaign Controller

Single owner of a campaign session's state: the busy flag, the
idle -> pending -> succeeded/failed -> idle state machine, the editable
draft and the archive.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional

import logfire

from generation.exceptions import GenerationError, ValidationError
from generation.main import EmailGenerator
from generation.models import GeneratedEmail, GenerationRequest, Language

from .exceptions import NoDraftError, SessionBusyError
from .models import ArchivedEmail, CampaignState, EmailDraft, GenerationStatus
from .store import ArchiveStore, InMemoryArchiveStore


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CampaignController:
    """
    Drives one campaign session.

    Only one generate() call may be pending at a time; a second call while
    pending fails fast with SessionBusyError. This is a flag, not a lock: the
    session is meant to be driven by a single UI.

    Status follows idle -> pending -> succeeded | failed -> idle. A session
    left in succeeded or failed returns to idle when the draft is archived
    or discarded, or at the start of the next generate() call, which also
    clears the previous error and draft.
    """

    def __init__(
        self,
        generator: Optional[EmailGenerator] = None,
        store: Optional[ArchiveStore] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.generator = generator or EmailGenerator()
        self.store = store if store is not None else InMemoryArchiveStore()
        self.clock = clock
        self.state = CampaignState()

    # ===================================================================
    # STATE
    # ===================================================================

    @property
    def status(self) -> GenerationStatus:
        return self.state.status

    @property
    def is_busy(self) -> bool:
        return self.state.is_busy

    @property
    def error_message(self) -> Optional[str]:
        return self.state.error_message

    @property
    def draft(self) -> Optional[EmailDraft]:
        return self.state.draft

    # ===================================================================
    # GENERATION
    # ===================================================================

    async def generate(self, request: GenerationRequest) -> GeneratedEmail:
        """
        Generate a new draft, replacing any previous one.

        Raises:
            SessionBusyError: Another generation is pending (generator not called)
            ValidationError: Blank product details (status becomes failed)
            GenerationError: Generation failed (status becomes failed)
        """
        if self.state.is_busy:
            logfire.warning("Generation rejected, another request is pending")
            raise SessionBusyError("A generation request is already pending")

        with logfire.span("campaign.generate", language=Language(request.language).value):
            # Leaving succeeded/failed goes back through idle first
            self.state.error_message = None
            self.state.draft = None
            if self.state.status != GenerationStatus.IDLE:
                self.state.transition(GenerationStatus.IDLE)
            self.state.transition(GenerationStatus.PENDING)

            try:
                email = await self.generator.generate(request)
            except (ValidationError, GenerationError) as e:
                self.state.error_message = e.user_message
                self.state.transition(GenerationStatus.FAILED)
                logfire.warning(
                    "Campaign generation failed",
                    error_type=type(e).__name__,
                    user_message=e.user_message
                )
                raise
            except BaseException:
                # Cancelled or unexpected: never leave the session stuck in pending
                self.state.transition(GenerationStatus.FAILED)
                raise

            self.state.draft = EmailDraft(
                subject=email.subject,
                body=email.body,
                request=request,
                generated_at=self.clock(),
            )
            self.state.transition(GenerationStatus.SUCCEEDED)

            logfire.info("Campaign draft ready", subject_length=len(email.subject))
            return email

    # ===================================================================
    # DRAFT
    # ===================================================================

    def _require_draft(self) -> EmailDraft:
        if self.state.draft is None:
            raise NoDraftError("There is no generated email to work with")
        return self.state.draft

    def update_draft(self, subject: str, body: str) -> EmailDraft:
        """
        Replace the draft's subject and body (edits made in the preview).

        Raises:
            NoDraftError: Nothing has been generated yet
            ValidationError: Subject or body is blank
        """
        draft = self._require_draft()
        if not subject.strip() or not body.strip():
            raise ValidationError.blank_draft(Language(draft.request.language))

        draft.subject = subject
        draft.body = body
        draft.edited = True

        logfire.info("Draft updated", subject_length=len(subject), body_length=len(body))
        return draft

    def discard_draft(self) -> None:
        """Drop the draft and return to idle."""
        self._require_draft()
        self.state.draft = None
        self.state.transition(GenerationStatus.IDLE)
        logfire.info("Draft discarded")

    # ===================================================================
    # ARCHIVE
    # ===================================================================

    def _archive_id(self, generated_at: datetime) -> str:
        base_id = generated_at.isoformat()
        archive_id = base_id
        suffix = 2
        while archive_id in self.store:
            archive_id = f"{base_id}-{suffix}"
            suffix += 1
        return archive_id

    def archive(self) -> ArchivedEmail:
        """
        Archive the draft with its campaign details and clear it.

        Raises:
            NoDraftError: Nothing to archive
        """
        draft = self._require_draft()
        request = draft.request

        with logfire.span("campaign.archive"):
            archived = ArchivedEmail(
                id=self._archive_id(draft.generated_at),
                subject=draft.subject,
                body=draft.body,
                product_description=request.product_description,
                product_url=request.product_url,
                timestamp=self.clock(),
                language=request.language,
                recipient_title=request.recipient_title,
            )
            self.store.add(archived)

            self.state.draft = None
            self.state.transition(GenerationStatus.IDLE)

            logfire.info(
                "Email archived",
                archive_id=archived.id,
                edited=draft.edited,
                archive_size=len(self.store)
            )
            return archived

    def archived(self) -> List[ArchivedEmail]:
        """Archived emails, newest first."""
        return list(reversed(self.store.list()))

    def get_archived(self, archive_id: str) -> Optional[ArchivedEmail]:
        return self.store.get(archive_id)
