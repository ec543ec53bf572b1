from __future__ import annotations

from dataclasses import dataclass

from system_messages.domain.entities.user import User


@dataclass(frozen=True, slots=True)
class SelectionResult:
    shown: tuple[User, ...] = ()
    collapsed: tuple[User, ...] = ()
    selected_for_link: tuple[User, ...] = ()
    self_included: bool = False


@dataclass(frozen=True, slots=True)
class NameList:
    """Resolved names handed to the text formatter."""

    names: tuple[str, ...]
    collapsed: int = 0
    self_included: bool = False
