from __future__ import annotations

import logging
from collections.abc import Mapping

from system_messages.infrastructure.localization import strings_en

logger = logging.getLogger(__name__)

_TABLES: dict[str, Mapping[str, str]] = {
    "en": strings_en.STRINGS,
}


class StringCatalog:
    """Key-based string lookup.

    Without params the raw template is returned, placeholders included.
    Unknown keys come back unchanged.
    """

    def __init__(self, strings: Mapping[str, str]) -> None:
        self._strings = strings

    @classmethod
    def for_locale(cls, locale: str) -> StringCatalog:
        language = locale.replace("-", "_").split("_")[0].lower()
        if language not in _TABLES:
            logger.warning("No strings for locale=%s, falling back to en", locale)
            language = "en"
        return cls(_TABLES[language])

    def localize(self, key: str, **params: str) -> str:
        template = self._strings.get(key)
        if template is None:
            logger.warning("Missing localized string: %s", key)
            return key
        if not params:
            return template
        return template.format(**params)
