"""Local invitations: an email or SMS from the user's own account."""
from __future__ import annotations

import logging

from system_messages.application.dto.invite import InviteDraft
from system_messages.application.dto.principal import Principal
from system_messages.application.exceptions import ChannelUnavailableError, ValidationError
from system_messages.application.ports.composer import InviteComposer
from system_messages.application.ports.localization import Localizer
from system_messages.domain.entities.contact import AddressBookContact
from system_messages.domain.value_objects.enums import InviteChannel

logger = logging.getLogger(__name__)


def invitation_body(principal: Principal, localizer: Localizer) -> str:
    if principal.handle:
        return localizer.localize("send_invitation.text", handle="@" + principal.handle)
    return localizer.localize("send_invitation_no_email.text")


def can_invite_with_email(composer: InviteComposer) -> bool:
    return composer.can_send_mail()


def can_invite_with_phone_number(composer: InviteComposer) -> bool:
    return composer.can_send_text()


def invite_with_email(
    contact: AddressBookContact,
    email: str,
    principal: Principal,
    composer: InviteComposer,
    localizer: Localizer,
) -> InviteDraft:
    if not can_invite_with_email(composer):
        logger.info("Rejected email invitation: channel unavailable")
        raise ChannelUnavailableError("Email invitations are not available")
    if email not in contact.emails:
        raise ValidationError(f"{email!r} is not an email address of {contact.name!r}")

    draft = InviteDraft(
        channel=InviteChannel.EMAIL,
        recipients=(email,),
        body=invitation_body(principal, localizer),
    )
    logger.debug("Composing %s invitation for contact %r", draft.channel, contact.name)
    return composer.compose(draft)


def invite_with_phone_number(
    contact: AddressBookContact,
    phone_number: str,
    principal: Principal,
    composer: InviteComposer,
    localizer: Localizer,
) -> InviteDraft:
    if not can_invite_with_phone_number(composer):
        logger.info("Rejected SMS invitation: channel unavailable")
        raise ChannelUnavailableError("SMS invitations are not available")
    if phone_number not in contact.phone_numbers:
        raise ValidationError(
            f"{phone_number!r} is not a phone number of {contact.name!r}"
        )

    draft = InviteDraft(
        channel=InviteChannel.SMS,
        recipients=(phone_number,),
        body=invitation_body(principal, localizer),
    )
    logger.debug("Composing %s invitation for contact %r", draft.channel, contact.name)
    return composer.compose(draft)
