"""Dependencies shared by the API routes."""

from typing import Annotated, Optional

from fastapi import Depends, Query

from campaign.controller import CampaignController
from config.settings import Settings, get_settings


# One campaign session per process, created on first use
_controller: Optional[CampaignController] = None


def get_campaign_controller() -> CampaignController:
    """
    FastAPI dependency that provides the process-wide campaign session.

    Tests replace it through app.dependency_overrides.
    """
    global _controller
    if _controller is None:
        import logfire

        logfire.info("Creating campaign session")
        _controller = CampaignController()
    return _controller


def reset_campaign_controller() -> None:
    """Forget the current session (archive included)."""
    global _controller
    _controller = None


def pagination_params(
    limit: int = Query(default=20, ge=1),
    offset: int = Query(default=0, ge=0)
) -> dict:
    """Reusable pagination, limit capped at 100."""
    return {"limit": min(limit, 100), "offset": offset}


# Type aliases for dependency injection
ControllerDep = Annotated[CampaignController, Depends(get_campaign_controller)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
PaginationParams = Annotated[dict, Depends(pagination_params)]
