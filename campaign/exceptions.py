"""
Campaign session exceptions.
"""

from generation.exceptions import MailerError


class SessionBusyError(MailerError):
    """Raised when generate() is called while another call is pending."""
    pass


class NoDraftError(MailerError):
    """Raised when editing or archiving without a generated email."""
    pass


class DuplicateArchiveError(MailerError):
    """Raised when an archive id is already taken."""

    def __init__(self, archive_id: str):
        self.archive_id = archive_id
        super().__init__(f"Archived email '{archive_id}' already exists")
