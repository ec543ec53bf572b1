from __future__ import annotations

from dataclasses import dataclass

from system_messages.application.dto.text import FormattedText
from system_messages.domain.value_objects.enums import ActionIcon


@dataclass(frozen=True, slots=True)
class RenderedSystemMessage:
    action: str
    icon: ActionIcon
    heading: FormattedText | None
    title: FormattedText | None
    shown_user_ids: list[int]
    collapsed_user_ids: list[int]
    selected_user_ids: list[int]
    self_included: bool
    show_invite_button: bool
    show_more_url: str | None
