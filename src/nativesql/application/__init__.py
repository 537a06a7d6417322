"""Application service layer entrypoints."""

from .services import CheckService, TranslateService

__all__ = [
    "TranslateService",
    "CheckService",
]
