from __future__ import annotations

from typing import Protocol

from system_messages.application.dto.selection import NameList
from system_messages.application.dto.text import FormattedText
from system_messages.domain.value_objects.action import ConversationAction


class ParticipantsTextFormatter(Protocol):
    def heading(
        self,
        sender_name: str,
        sender_is_self: bool,
        conversation_name: str,
    ) -> FormattedText: ...

    def title(
        self,
        sender_name: str,
        sender_is_self: bool,
        action: ConversationAction,
        names: NameList | None = None,
    ) -> FormattedText | None: ...
