"""
Archive storage.

ArchiveStore is the key-value seam for archived emails. The only backend is
in-memory: archives live as long as the process.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .exceptions import DuplicateArchiveError
from .models import ArchivedEmail


class ArchiveStore(ABC):
    """Append-only store of archived emails keyed by id, in insertion order."""

    @abstractmethod
    def add(self, email: ArchivedEmail) -> None:
        """
        Append an archived email.

        Raises:
            DuplicateArchiveError: If the id is already stored
        """

    @abstractmethod
    def get(self, archive_id: str) -> Optional[ArchivedEmail]:
        """Return the archived email with this id, or None."""

    @abstractmethod
    def list(self) -> List[ArchivedEmail]:
        """All archived emails, oldest first."""

    @abstractmethod
    def __contains__(self, archive_id: object) -> bool:
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...


class InMemoryArchiveStore(ArchiveStore):

    def __init__(self):
        # dicts keep insertion order
        self._emails: Dict[str, ArchivedEmail] = {}

    def add(self, email: ArchivedEmail) -> None:
        if email.id in self._emails:
            raise DuplicateArchiveError(email.id)
        self._emails[email.id] = email

    def get(self, archive_id: str) -> Optional[ArchivedEmail]:
        return self._emails.get(archive_id)

    def list(self) -> List[ArchivedEmail]:
        return list(self._emails.values())

    def __contains__(self, archive_id: object) -> bool:
        return archive_id in self._emails

    def __len__(self) -> int:
        return len(self._emails)
