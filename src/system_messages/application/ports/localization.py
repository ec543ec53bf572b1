from __future__ import annotations

from typing import Protocol


class Localizer(Protocol):
    def localize(self, key: str, **params: str) -> str: ...
