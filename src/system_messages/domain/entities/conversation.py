from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from system_messages.domain.entities.user import User


@dataclass(frozen=True, slots=True)
class Conversation:
    id: UUID
    display_name: str
    active_participants: tuple[User, ...] = ()
    can_manage_access: bool = False
    allow_guests: bool = False

    def is_active(self, user: User) -> bool:
        return any(p.id == user.id for p in self.active_participants)
