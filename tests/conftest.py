"""Shared test fixtures."""
from __future__ import annotations

import uuid
from uuid import UUID

import pytest

from system_messages.application.dto.principal import Principal
from system_messages.application.dto.text import TextStyle
from system_messages.domain.entities.conversation import Conversation
from system_messages.domain.entities.message import SystemMessage
from system_messages.domain.entities.user import User
from system_messages.domain.value_objects.enums import SystemMessageType
from system_messages.infrastructure.localization.catalog import StringCatalog
from system_messages.services.display_names import ConversationDisplayNames

SELF_ID = 42


@pytest.fixture
def localizer() -> StringCatalog:
    return StringCatalog.for_locale("en")


@pytest.fixture
def names(localizer) -> ConversationDisplayNames:
    return ConversationDisplayNames(localizer)


@pytest.fixture
def style() -> TextStyle:
    return TextStyle(font="regular", bold_font="bold", large_font="large", text_color="#000")


@pytest.fixture
def principal() -> Principal:
    return Principal(subject_id=SELF_ID, handle="me")


def make_user(user_id: int, name: str | None = None, *, is_self: bool = False) -> User:
    return User(id=user_id, name=name or f"User {user_id:02d}", is_self=is_self)


def make_self_user(name: str = "Self Person") -> User:
    return make_user(SELF_ID, name, is_self=True)


def make_users(count: int, start: int = 100) -> list[User]:
    return [make_user(start + i) for i in range(count)]


def make_conversation(
    *,
    participants: list[User] | None = None,
    can_manage_access: bool = False,
    allow_guests: bool = False,
    conversation_id: UUID | None = None,
) -> Conversation:
    return Conversation(
        id=conversation_id or uuid.uuid4(),
        display_name="Team",
        active_participants=tuple(participants or ()),
        can_manage_access=can_manage_access,
        allow_guests=allow_guests,
    )


def make_message(
    message_type: SystemMessageType,
    *,
    sender: User | None,
    users: list[User],
    conversation: Conversation | None = None,
    text: str | None = None,
) -> SystemMessage:
    return SystemMessage(
        id=uuid.uuid4(),
        type=message_type,
        sender=sender,
        users=tuple(users),
        conversation=conversation,
        text=text,
    )
