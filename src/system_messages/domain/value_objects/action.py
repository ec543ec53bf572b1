"""Conversation actions carried by participant system messages.

Each action is a small frozen dataclass; ``ConversationAction`` is the
closed union of them and every ``match`` over it ends in ``assert_never``
so that a new variant fails type checking until it is handled.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from system_messages.domain.value_objects.enums import ActionIcon, SystemMessageType

if TYPE_CHECKING:
    from system_messages.domain.entities.message import SystemMessage


@dataclass(frozen=True, slots=True)
class NoAction:
    pass


@dataclass(frozen=True, slots=True)
class Started:
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Added:
    includes_self: bool = False


@dataclass(frozen=True, slots=True)
class Removed:
    pass


@dataclass(frozen=True, slots=True)
class Left:
    pass


@dataclass(frozen=True, slots=True)
class TeamMemberLeft:
    pass


ConversationAction = NoAction | Started | Added | Removed | Left | TeamMemberLeft


def involves_users_other_than_sender(action: ConversationAction) -> bool:
    match action:
        case Left() | TeamMemberLeft() | Added(includes_self=True):
            return False
        case NoAction() | Started() | Added() | Removed():
            return True
        case _:
            assert_never(action)


def action_icon(action: ConversationAction) -> ActionIcon:
    match action:
        case Started() | NoAction():
            return ActionIcon.CONVERSATION
        case Added():
            return ActionIcon.PLUS
        case Removed() | Left() | TeamMemberLeft():
            return ActionIcon.MINUS
        case _:
            assert_never(action)


def action_name(action: ConversationAction) -> str:
    """Stable snake_case name used in API responses and string keys."""
    match action:
        case NoAction():
            return "none"
        case Started():
            return "started"
        case Added():
            return "added"
        case Removed():
            return "removed"
        case Left():
            return "left"
        case TeamMemberLeft():
            return "team_member_left"
        case _:
            assert_never(action)


def action_for(message: SystemMessage) -> ConversationAction:
    """Derive the action from a system message, once per event."""
    match message.type:
        case SystemMessageType.PARTICIPANTS_REMOVED:
            return Left() if message.user_is_the_sender else Removed()
        case SystemMessageType.PARTICIPANTS_ADDED:
            return Added(includes_self=message.user_is_the_sender)
        case SystemMessageType.NEW_CONVERSATION:
            return Started(name=message.text)
        case SystemMessageType.TEAM_MEMBER_LEAVE:
            return TeamMemberLeft()
        case _:
            return NoAction()
