"""
Language list endpoint.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from lingualink.languages import fallback_languages
from lingualink.observability import get_logger
from lingualink.persistence import PersistenceError, TranslationRepository

from .deps import get_repository
from .schemas import ErrorResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/languages")
async def list_languages(
    repository: TranslationRepository = Depends(get_repository),
) -> JSONResponse:
    """List supported languages.

    Falls back to the built-in list when the store holds none.
    """
    try:
        languages = await repository.get_languages()
    except PersistenceError as e:
        logger.error("Failed to fetch languages", error=e.message)
        return JSONResponse(
            ErrorResponse(error="Failed to fetch languages").to_json(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if not languages:
        languages = fallback_languages()

    return JSONResponse(
        {
            "languages": [
                language.model_dump(mode="json", exclude_none=True) for language in languages
            ]
        }
    )
