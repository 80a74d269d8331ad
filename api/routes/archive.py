"""Archive API endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, status
import logfire

from api.dependencies import ControllerDep, PaginationParams
from campaign.exceptions import NoDraftError
from schemas.email import ArchivedEmailResponse


router = APIRouter(prefix="/api/archive", tags=["Archive"])


@router.post("/", response_model=ArchivedEmailResponse, status_code=status.HTTP_201_CREATED)
async def archive_draft(controller: ControllerDep):
    """
    Archive the current draft and clear it.

    Returns:
        ArchivedEmailResponse: The new archive entry

    Raises:
        HTTPException 404: No draft to archive
    """
    try:
        return controller.archive()
    except NoDraftError:
        logfire.warning("Archive requested without a draft")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No draft available to archive"
        )


@router.get("/", response_model=List[ArchivedEmailResponse])
async def list_archive(controller: ControllerDep, pagination: PaginationParams):
    """
    List archived emails (paginated, newest first).

    Args:
        controller: Campaign session (injected by dependency)
        pagination: limit (default 20, max 100) and offset
    """
    limit = pagination["limit"]
    offset = pagination["offset"]

    with logfire.span("api.list_archive", limit=limit, offset=offset):
        emails = controller.archived()[offset:offset + limit]
        logfire.info("Archive retrieved", count=len(emails))
        return emails


@router.get("/{archive_id}", response_model=ArchivedEmailResponse)
async def get_archived_email(archive_id: str, controller: ControllerDep):
    """
    Get one archived email by id.

    Raises:
        HTTPException 404: Unknown id
    """
    email = controller.get_archived(archive_id)
    if email is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Archived email not found"
        )
    return email
