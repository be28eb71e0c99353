"""
i18n Routes

    GET /api/i18n/languages → supported site locales (public)
"""

from fastapi import APIRouter
from pydantic import BaseModel

from marketing_site.i18n.locale import SUPPORTED_LOCALES, get_language_info

i18n_router = APIRouter(prefix="/api/i18n", tags=["Internationalization"])


class LanguageInfo(BaseModel):
    code: str
    name: str
    hreflang: str
    og_locale: str
    is_default: bool


@i18n_router.get("/languages", response_model=list[LanguageInfo])
async def list_supported_languages() -> list[LanguageInfo]:
    """Return metadata for every supported locale, default locale flagged."""
    return [LanguageInfo(**get_language_info(code)) for code in SUPPORTED_LOCALES]
