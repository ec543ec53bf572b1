from __future__ import annotations

from system_messages.domain.entities.conversation import Conversation
from system_messages.domain.value_objects.action import ConversationAction, Started


def can_show_invite_button(
    action: ConversationAction,
    conversation: Conversation | None,
) -> bool:
    """Guests can be invited right after a conversation is started, if allowed."""
    if not isinstance(action, Started) or conversation is None:
        return False
    return conversation.can_manage_access and conversation.allow_guests
