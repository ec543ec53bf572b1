from __future__ import annotations

from dataclasses import dataclass, replace

from system_messages.domain.value_objects.enums import InviteChannel


@dataclass(frozen=True, slots=True)
class InviteDraft:
    channel: InviteChannel
    recipients: tuple[str, ...]
    body: str
    url: str | None = None

    def with_url(self, url: str) -> InviteDraft:
        return replace(self, url=url)
