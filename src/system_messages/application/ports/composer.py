from __future__ import annotations

from typing import Protocol

from system_messages.application.dto.invite import InviteDraft


class InviteComposer(Protocol):
    def can_send_mail(self) -> bool: ...

    def can_send_text(self) -> bool: ...

    def compose(self, draft: InviteDraft) -> InviteDraft: ...
