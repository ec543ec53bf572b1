from __future__ import annotations

from system_messages.application.dto.rendered import RenderedSystemMessage
from system_messages.application.ports.formatter import ParticipantsTextFormatter
from system_messages.application.ports.names import DisplayNameResolver
from system_messages.domain.entities.message import SystemMessage
from system_messages.domain.value_objects.action import action_name
from system_messages.services.participants_cell import (
    SHOW_MORE_LINK_URL,
    ParticipantsCellViewModel,
)


def render(
    message: SystemMessage,
    names: DisplayNameResolver,
    formatter: ParticipantsTextFormatter | None,
) -> RenderedSystemMessage:
    """Render one participants system message for the calling self-user."""
    cell = ParticipantsCellViewModel(message, names, formatter)
    return RenderedSystemMessage(
        action=action_name(cell.action),
        icon=cell.icon(),
        heading=cell.attributed_heading(),
        title=cell.attributed_title(),
        shown_user_ids=[u.id for u in cell.shown_users],
        collapsed_user_ids=[u.id for u in cell.collapsed_users],
        selected_user_ids=[u.id for u in cell.selected_users],
        self_included=cell.is_self_included,
        show_invite_button=cell.show_invite_button,
        show_more_url=SHOW_MORE_LINK_URL if cell.collapsed_users else None,
    )
