"""Display labels for the languages the site ships with."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class I18nKey(str, Enum):
    UNCATEGORIZED = "uncategorized"


DEFAULT_LANG = "en"

TRANSLATIONS: Dict[str, Dict[I18nKey, str]] = {
    "en": {I18nKey.UNCATEGORIZED: "Uncategorized"},
    "zh_cn": {I18nKey.UNCATEGORIZED: "未分类"},
    "ja": {I18nKey.UNCATEGORIZED: "カテゴリなし"},
}


def translate(key: I18nKey, lang: str = DEFAULT_LANG) -> str:
    """Look up ``key`` for ``lang``, falling back to English."""
    normalized = lang.lower().replace("-", "_")
    table = TRANSLATIONS.get(normalized, TRANSLATIONS[DEFAULT_LANG])
    return table.get(key, TRANSLATIONS[DEFAULT_LANG][key])
