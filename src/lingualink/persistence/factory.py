"""
Factory for object stores.
"""

import logging

from lingualink.config import Settings

from .cosmic_client import CosmicClient
from .interface import ObjectStore
from .memory import InMemoryObjectStore

logger = logging.getLogger(__name__)


def create_object_store(settings: Settings) -> ObjectStore:
    """Create the object store for the given settings.

    Falls back to an in-memory store when no Cosmic bucket is configured.
    Records kept there are lost on restart.
    """
    if not settings.cosmic_configured:
        logger.warning(
            "Cosmic bucket not configured (COSMIC_BUCKET_SLUG/COSMIC_READ_KEY); "
            "using in-memory object store"
        )
        return InMemoryObjectStore()

    if not settings.cosmic_write_key:
        logger.warning("COSMIC_WRITE_KEY not set; saving and deleting records will fail")

    logger.info(f"Using Cosmic bucket {settings.cosmic_bucket_slug}")
    return CosmicClient(
        bucket_slug=settings.cosmic_bucket_slug,
        read_key=settings.cosmic_read_key,
        write_key=settings.cosmic_write_key,
        api_url=settings.cosmic_api_url,
        timeout_seconds=settings.cosmic_timeout_seconds,
    )
