"""
Admin Email Generation Routes

FastAPI router exposing the email generator to the admin dashboard.
I/O only: validation errors become 400, everything else is the generator's job.

Routes:
  POST /admin/email/generate  → RenderedMessage
  GET  /admin/email/generate  → GenerationStatus (backends + template list)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from composer import (
    EmailGenerator,
    GenerationRequest,
    GenerationStatus,
    PromptValidationError,
    RenderedMessage,
)
from infra import get_generator

from .admin_auth import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin/email",
    tags=["Admin Email"],
    dependencies=[Depends(require_admin)],
)


@router.post(
    "/generate",
    response_model=RenderedMessage,
    response_model_exclude_none=True,
    response_model_by_alias=True,
)
async def generate_email(
    request: GenerationRequest,
    generator: EmailGenerator = Depends(get_generator),
) -> RenderedMessage:
    """
    Generate an email with backend cascade → template fallback.

    Expected payload:
    {
        "prompt": "announce the new streak reminders",
        "variables": {"user": "Ada", "appName": "CommitHabit", "ctaLink": "https://..."}
    }

    Raises:
        HTTPException(400): Prompt absent, non-string or too short
    """
    try:
        return await generator.generate(request)
    except PromptValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "/generate",
    response_model=GenerationStatus,
    response_model_by_alias=True,
)
async def generation_status(
    generator: EmailGenerator = Depends(get_generator),
) -> GenerationStatus:
    """Report whether AI generation is configured and list available templates."""
    return generator.status()
