"""
FastAPI dependencies.

Services are built once by ``create_app`` and kept on ``app.state``.
"""

from fastapi import Request

from lingualink.persistence import TranslationRepository
from lingualink.translation import TranslationService


def get_translation_service(request: Request) -> TranslationService:
    return request.app.state.translation_service


def get_repository(request: Request) -> TranslationRepository:
    return request.app.state.repository
