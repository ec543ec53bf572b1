"""Which users a participants system message shows and which it collapses.

A message lists up to ``MAX_SHOWN_USERS`` users by name. Past that, only
the first ``MAX_SHOWN_USERS_WHEN_COLLAPSED`` are named and the rest are
folded into an "and N others" link. The self-user is never collapsed: it
is appended after the named users and takes one slot off both limits.
"""
from __future__ import annotations

import logging

from system_messages.application.dto.selection import SelectionResult
from system_messages.application.ports.names import DisplayNameResolver
from system_messages.domain.entities.message import SystemMessage
from system_messages.domain.entities.user import User
from system_messages.domain.value_objects.action import (
    Added,
    action_for,
    involves_users_other_than_sender,
)

logger = logging.getLogger(__name__)

MAX_SHOWN_USERS = 17
MAX_SHOWN_USERS_WHEN_COLLAPSED = 15


def sorted_users(message: SystemMessage, names: DisplayNameResolver) -> list[User]:
    """Affected users other than the sender, sorted by resolved name."""
    sender = message.sender
    if sender is None:
        return []
    others = [u for u in message.users if u.id != sender.id]
    return sorted(others, key=lambda u: names.name_of(u, message))


def select(message: SystemMessage, names: DisplayNameResolver) -> SelectionResult:
    action = action_for(message)
    if message.sender is None or not involves_users_other_than_sender(action):
        return SelectionResult()

    users = sorted_users(message, names)
    self_user = next((u for u in users if u.is_self), None)
    self_included = self_user is not None

    max_shown = MAX_SHOWN_USERS - 1 if self_included else MAX_SHOWN_USERS
    boundary = (
        MAX_SHOWN_USERS_WHEN_COLLAPSED - 1 if self_included else MAX_SHOWN_USERS_WHEN_COLLAPSED
    )

    others = [u for u in users if not u.is_self]
    if len(others) <= max_shown:
        shown, collapsed = others, []
    else:
        shown, collapsed = others[:boundary], others[boundary:]
        logger.debug(
            "Collapsed %d of %d users in message %s",
            len(collapsed), len(others), message.id,
        )

    if self_user is not None:
        shown = [*shown, self_user]

    return SelectionResult(
        shown=tuple(shown),
        collapsed=tuple(collapsed),
        selected_for_link=tuple(collapsed) if isinstance(action, Added) else (),
        self_included=self_included,
    )
