from __future__ import annotations

from system_messages.application.ports.localization import Localizer
from system_messages.domain.entities.conversation import Conversation
from system_messages.domain.entities.message import SystemMessage
from system_messages.domain.entities.user import User
from system_messages.domain.value_objects.action import Started, action_for
from system_messages.domain.value_objects.enums import GrammaticalCase


def grammatical_case(user: User, message: SystemMessage) -> GrammaticalCase:
    """Case of ``user`` within the sentence, needed to localize "you"."""
    # the sender is always the subject
    if message.sender is not None and user.id == message.sender.id:
        return GrammaticalCase.NOMINATIVE
    # "started with ... user"
    if isinstance(action_for(message), Started):
        return GrammaticalCase.DATIVE
    return GrammaticalCase.ACCUSATIVE


def conversation_display_name(user: User, conversation: Conversation) -> str:
    """First name, or the full name when another participant shares it."""
    first = _first_name(user.name)
    clash = any(
        p.id != user.id and _first_name(p.name) == first
        for p in conversation.active_participants
    )
    return user.name if clash or not first else first


def _first_name(name: str) -> str:
    parts = name.split()
    return parts[0] if parts else ""


class ConversationDisplayNames:
    """Default ``DisplayNameResolver``."""

    def __init__(self, localizer: Localizer) -> None:
        self._localizer = localizer

    def name_of(self, user: User, message: SystemMessage) -> str:
        if user.is_self:
            case = grammatical_case(user, message)
            return self._localizer.localize(f"content.system.you_{case}")

        conversation = message.conversation
        if conversation is not None and conversation.is_active(user):
            return conversation_display_name(user, conversation)
        return user.name
