"""
Email generation API endpoints.

Generation is synchronous: the request waits for Gemini (typically a few
seconds) and returns the draft. Only one generation may be pending per
session.
"""

from fastapi import APIRouter, HTTPException, Response, status
import logfire

from api.dependencies import ControllerDep, SettingsDep
from campaign.exceptions import NoDraftError, SessionBusyError
from generation.exceptions import GenerationError, ValidationError
from generation.models import Language
from schemas.email import DraftResponse, GenerateEmailRequest, StatusResponse, UpdateDraftRequest


router = APIRouter(prefix="/api/email", tags=["Email Generation"])


@router.post("/generate", response_model=DraftResponse)
async def generate_email(
    request: GenerateEmailRequest,
    controller: ControllerDep,
    settings: SettingsDep,
):
    """
    Generate a marketing email for a product.

    Args:
        request: Product details, language and audience options
        controller: Campaign session (injected by dependency)
        settings: Application settings (injected by dependency)

    Returns:
        DraftResponse: The new editable draft

    Raises:
        HTTPException 400: Product description or URL is blank
        HTTPException 409: Another generation is pending
        HTTPException 502: Gemini failed or returned an invalid email
    """
    generation_request = request.to_generation_request(Language(settings.default_language))

    with logfire.span(
        "api.generate_email",
        language=generation_request.language.value,
        recipient_count=generation_request.recipient_count
    ):
        try:
            await controller.generate(generation_request)
        except SessionBusyError:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="A generation request is already in progress"
            )
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.user_message
            )
        except GenerationError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=e.user_message
            )

        return DraftResponse.from_draft(controller.draft)


@router.get("/status", response_model=StatusResponse)
async def get_status(controller: ControllerDep):
    """Current generation status and the last error message, if any."""
    return StatusResponse(
        status=controller.status,
        has_draft=controller.draft is not None,
        error=controller.error_message,
        archive_size=len(controller.store),
    )


@router.get("/draft", response_model=DraftResponse)
async def get_draft(controller: ControllerDep):
    """
    Return the current draft.

    Raises:
        HTTPException 404: No draft (nothing generated, or already archived)
    """
    if controller.draft is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No draft available"
        )
    return DraftResponse.from_draft(controller.draft)


@router.put("/draft", response_model=DraftResponse)
async def update_draft(request: UpdateDraftRequest, controller: ControllerDep):
    """
    Edit the subject and body of the current draft.

    Raises:
        HTTPException 400: Subject or body is blank
        HTTPException 404: No draft to edit
    """
    try:
        draft = controller.update_draft(subject=request.subject, body=request.body)
    except NoDraftError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No draft available"
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.user_message
        )
    return DraftResponse.from_draft(draft)


@router.delete("/draft", status_code=status.HTTP_204_NO_CONTENT)
async def discard_draft(controller: ControllerDep):
    """
    Discard the current draft without archiving it.

    Raises:
        HTTPException 404: No draft to discard
    """
    try:
        controller.discard_draft()
    except NoDraftError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No draft available"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
