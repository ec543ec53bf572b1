from __future__ import annotations

import re
from functools import cached_property

from system_messages.application.dto.selection import NameList, SelectionResult
from system_messages.application.dto.text import FormattedText
from system_messages.application.policies.invitations import can_show_invite_button
from system_messages.application.ports.formatter import ParticipantsTextFormatter
from system_messages.application.ports.names import DisplayNameResolver
from system_messages.domain.entities.message import SystemMessage
from system_messages.domain.entities.user import User
from system_messages.domain.value_objects.action import (
    ConversationAction,
    Started,
    action_for,
    action_icon,
    involves_users_other_than_sender,
)
from system_messages.domain.value_objects.enums import ActionIcon
from system_messages.services.participants_selection import select

SHOW_MORE_LINK_URL = "action://show-all"

_WORD = re.compile(r"[^\s-]+")


def capitalized(name: str) -> str:
    """Upper-case the first letter of each word, lower-case the rest.

    Words break on whitespace and hyphens: "mary-jane o'neil" -> "Mary-Jane O'neil".
    """
    return _WORD.sub(lambda m: m.group(0).capitalize(), name)


class ParticipantsCellViewModel:
    """Everything a participants system message cell displays."""

    def __init__(
        self,
        message: SystemMessage,
        names: DisplayNameResolver,
        formatter: ParticipantsTextFormatter | None = None,
    ) -> None:
        self.message = message
        self._names = names
        self._formatter = formatter

    @cached_property
    def action(self) -> ConversationAction:
        return action_for(self.message)

    @cached_property
    def selection(self) -> SelectionResult:
        return select(self.message, self._names)

    @property
    def shown_users(self) -> tuple[User, ...]:
        """Users named in the message, self last when included."""
        return self.selection.shown

    @property
    def collapsed_users(self) -> tuple[User, ...]:
        """Users folded into the "and N others" link."""
        return self.selection.collapsed

    @property
    def selected_users(self) -> tuple[User, ...]:
        """Users represented by the link after being added."""
        return self.selection.selected_for_link

    @property
    def is_self_included(self) -> bool:
        return self.selection.self_included

    @property
    def show_invite_button(self) -> bool:
        return can_show_invite_button(self.action, self.message.conversation)

    @property
    def name_list(self) -> NameList:
        return NameList(
            names=tuple(self.name_of(u) for u in self.shown_users),
            collapsed=len(self.collapsed_users),
            self_included=self.is_self_included,
        )

    def name_of(self, user: User) -> str:
        return self._names.name_of(user, self.message)

    def icon(self) -> ActionIcon:
        return action_icon(self.action)

    def attributed_heading(self) -> FormattedText | None:
        action = self.action
        sender = self.message.sender
        if not isinstance(action, Started) or action.name is None:
            return None
        if sender is None or self._formatter is None:
            return None

        return self._formatter.heading(
            sender_name=capitalized(self.name_of(sender)),
            sender_is_self=sender.is_self,
            conversation_name=action.name,
        )

    def attributed_title(self) -> FormattedText | None:
        sender = self.message.sender
        if sender is None or self._formatter is None:
            return None

        sender_name = capitalized(self.name_of(sender))
        if involves_users_other_than_sender(self.action):
            return self._formatter.title(
                sender_name, sender.is_self, self.action, names=self.name_list,
            )
        return self._formatter.title(sender_name, sender.is_self, self.action)
