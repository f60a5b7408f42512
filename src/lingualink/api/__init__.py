"""HTTP API routers."""

from . import history, languages, translate

__all__ = ["history", "languages", "translate"]
