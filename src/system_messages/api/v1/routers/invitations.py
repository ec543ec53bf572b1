from __future__ import annotations

from fastapi import APIRouter

from system_messages.api.deps import ComposerDep, CurrentPrincipal, LocalizerDep
from system_messages.api.v1.schemas.invitation import (
    InviteChannelsResponse,
    InviteRequest,
    InviteResponse,
)
from system_messages.services import invitation_service

router = APIRouter(prefix="/api/v1/invitations", tags=["invitations"])


@router.get("/channels", response_model=InviteChannelsResponse)
async def list_channels(
    principal: CurrentPrincipal,
    composer: ComposerDep,
) -> InviteChannelsResponse:
    return InviteChannelsResponse(
        email=invitation_service.can_invite_with_email(composer),
        sms=invitation_service.can_invite_with_phone_number(composer),
    )


@router.post("", response_model=InviteResponse)
async def create_invitation(
    body: InviteRequest,
    principal: CurrentPrincipal,
    composer: ComposerDep,
    localizer: LocalizerDep,
) -> InviteResponse:
    contact = body.contact.to_domain()
    if body.email is not None:
        draft = invitation_service.invite_with_email(
            contact, body.email, principal, composer, localizer,
        )
    else:
        assert body.phone_number is not None
        draft = invitation_service.invite_with_phone_number(
            contact, body.phone_number, principal, composer, localizer,
        )
    return InviteResponse.model_validate(draft, from_attributes=True)
