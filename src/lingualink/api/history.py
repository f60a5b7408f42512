"""
Translation history endpoints.
"""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from lingualink.observability import get_logger
from lingualink.persistence import PersistenceError, TranslationRepository

from .deps import get_repository
from .schemas import ErrorResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/history")
async def get_history(
    user_id: str | None = Query(default=None, alias="userId"),
    repository: TranslationRepository = Depends(get_repository),
) -> JSONResponse:
    """List saved translations, newest first."""
    try:
        translations = await repository.get_translation_history(user_id)
    except PersistenceError as e:
        logger.error("Failed to fetch translation history", user_id=user_id, error=e.message)
        return JSONResponse(
            ErrorResponse(error="Failed to fetch translation history").to_json(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return JSONResponse(
        {"translations": [t.model_dump(mode="json", exclude_none=True) for t in translations]}
    )


@router.delete("/history")
async def delete_history_entry(
    translation_id: str | None = Query(default=None, alias="id"),
    repository: TranslationRepository = Depends(get_repository),
) -> JSONResponse:
    """Delete one saved translation. Deleting an unknown id succeeds."""
    if not translation_id:
        return JSONResponse(
            ErrorResponse(error="Translation ID is required").to_json(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        await repository.delete_translation(translation_id)
    except PersistenceError as e:
        logger.error("Failed to delete translation", translation_id=translation_id, error=e.message)
        return JSONResponse(
            ErrorResponse(error="Failed to delete translation").to_json(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return JSONResponse({"success": True})
