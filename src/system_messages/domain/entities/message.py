from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from system_messages.domain.entities.conversation import Conversation
from system_messages.domain.entities.user import User
from system_messages.domain.value_objects.enums import SystemMessageType


@dataclass(frozen=True, slots=True)
class SystemMessage:
    """A non-text conversation event rendered inline in the message list."""

    id: UUID
    type: SystemMessageType
    sender: User | None
    users: tuple[User, ...]
    conversation: Conversation | None = None
    text: str | None = None

    @property
    def user_is_the_sender(self) -> bool:
        """True when the only affected user is the sender (joined or left)."""
        if self.sender is None or len(self.users) != 1:
            return False
        return self.users[0].id == self.sender.id
