"""Shared request dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException, Query, status

from backend.app.adapters.fixtures import fetch_tours
from backend.app.config import get_settings
from backend.app.models.tour import Tour


def get_language(lang: Annotated[str | None, Query(description="Language code")] = None) -> str:
    """Resolve the request language, defaulting to the configured one.

    Raises:
        HTTPException: 400 if the language is not supported
    """
    settings = get_settings()
    language = lang or settings.default_language
    if language not in settings.supported_languages:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported language: {language}",
        )
    return language


def get_catalogue(language: Annotated[str, Depends(get_language)]) -> list[Tour]:
    """Locale-resolved tour catalogue for the request."""
    return fetch_tours(language).value
