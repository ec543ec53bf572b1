from __future__ import annotations

from typing import Protocol

from system_messages.domain.entities.message import SystemMessage
from system_messages.domain.entities.user import User


class DisplayNameResolver(Protocol):
    def name_of(self, user: User, message: SystemMessage) -> str: ...
