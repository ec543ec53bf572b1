from __future__ import annotations

import logging
from urllib.parse import quote

from system_messages.application.dto.invite import InviteDraft
from system_messages.domain.value_objects.enums import InviteChannel

logger = logging.getLogger(__name__)


class UrlSchemeComposer:
    """Hands invitations to the client as ``mailto:`` / ``sms:`` URLs."""

    def __init__(self, email_enabled: bool = True, sms_enabled: bool = True) -> None:
        self._email_enabled = email_enabled
        self._sms_enabled = sms_enabled

    def can_send_mail(self) -> bool:
        return self._email_enabled

    def can_send_text(self) -> bool:
        return self._sms_enabled

    def compose(self, draft: InviteDraft) -> InviteDraft:
        recipients = ",".join(quote(r, safe="@+") for r in draft.recipients)
        body = quote(draft.body, safe="")
        if draft.channel == InviteChannel.EMAIL:
            url = f"mailto:{recipients}?body={body}"
        else:
            url = f"sms:{recipients}?body={body}"
        logger.info("Composed %s invitation for %d recipient(s)", draft.channel, len(draft.recipients))
        return draft.with_url(url)
