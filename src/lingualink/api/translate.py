"""
Translation endpoints.

POST /translate runs the translation pipeline; GET /translate reports
whether the completion API is configured.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from lingualink.observability import bind_request_context, get_logger
from lingualink.translation import (
    TranslationError,
    TranslationService,
    TranslationValidationError,
)

from .deps import get_translation_service
from .schemas import ErrorResponse, ServiceStatusResponse, TranslateRequest, TranslateResponse

router = APIRouter()
logger = get_logger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "Translation failed. Please try again."
INVALID_BODY_MESSAGE = "Invalid request body"


def _error(status_code: int, message: str, code: str | None = None) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message, code=code).to_json(), status_code=status_code)


@router.post("/translate")
async def translate(
    request: Request,
    service: TranslationService = Depends(get_translation_service),
) -> JSONResponse:
    """Translate text.

    Returns:
        200 with the translation, 400 for invalid input, 500 with a
        machine-readable ``code`` for configuration and provider failures
    """
    log = bind_request_context(logger, request_id=getattr(request.state, "request_id", "-"))

    try:
        body = await request.json()
    except ValueError:
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)
    if not isinstance(body, dict):
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

    try:
        payload = TranslateRequest.model_validate(body)
    except ValidationError as e:
        log.info("Rejected translation request body", errors=e.error_count())
        return _error(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

    try:
        result = await service.translate(
            payload.text,
            payload.source_language,
            payload.target_language,
            auto_detect=payload.auto_detect,
        )
    except TranslationValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, e.message)
    except TranslationError as e:
        log.error("Translation failed", code=e.code.value, error=e.message)
        return JSONResponse(e.to_dict(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except Exception:
        log.exception("Unexpected error during translation")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, INTERNAL_ERROR_CODE
        )

    log.info(
        "Translation completed",
        source_language=result.source_language,
        target_language=result.target_language,
        detected=result.detected_language is not None,
        characters=len(payload.text),
    )
    return JSONResponse(TranslateResponse.from_result(result).to_json())


@router.get("/translate")
async def translation_status(
    service: TranslationService = Depends(get_translation_service),
) -> JSONResponse:
    """Report whether translation is available."""
    error = service.configuration_error
    if error is None:
        body = ServiceStatusResponse(
            status="ok", configured=True, message="Translation service is configured"
        )
    else:
        body = ServiceStatusResponse(status="error", configured=False, message=error.message)
    return JSONResponse(body.to_json())
