from __future__ import annotations

import uuid
from uuid import UUID

from pydantic import BaseModel, Field

from system_messages.application.dto.text import TextStyle
from system_messages.application.exceptions import ValidationError
from system_messages.domain.entities.conversation import Conversation
from system_messages.domain.entities.message import SystemMessage
from system_messages.domain.entities.user import User
from system_messages.domain.value_objects.enums import (
    ActionIcon,
    SpanAttribute,
    SystemMessageType,
)


class UserSchema(BaseModel):
    id: int
    name: str
    handle: str | None = None


class ConversationSchema(BaseModel):
    id: UUID
    display_name: str
    active_participant_ids: list[int] = Field(default_factory=list)
    can_manage_access: bool = False
    allow_guests: bool = False


class SystemMessageSchema(BaseModel):
    id: UUID = Field(default_factory=uuid.uuid4)
    type: SystemMessageType
    sender_id: int | None = None
    user_ids: list[int] = Field(default_factory=list)
    text: str | None = None


class TextStyleSchema(BaseModel):
    font: str | None = None
    bold_font: str | None = None
    large_font: str | None = None
    text_color: str | None = None

    def to_domain(self) -> TextStyle:
        return TextStyle(**self.model_dump())


class RenderRequest(BaseModel):
    message: SystemMessageSchema
    users: list[UserSchema] = Field(default_factory=list)
    conversation: ConversationSchema | None = None
    style: TextStyleSchema | None = None

    def to_domain(self, self_id: int) -> SystemMessage:
        """Build the message snapshot; ``self_id`` marks the self-user."""
        users = {
            u.id: User(id=u.id, name=u.name, handle=u.handle, is_self=u.id == self_id)
            for u in self.users
        }

        def lookup(user_id: int) -> User:
            try:
                return users[user_id]
            except KeyError:
                raise ValidationError(f"Unknown user id {user_id}") from None

        conversation = None
        if self.conversation is not None:
            conversation = Conversation(
                id=self.conversation.id,
                display_name=self.conversation.display_name,
                active_participants=tuple(
                    lookup(i) for i in self.conversation.active_participant_ids
                ),
                can_manage_access=self.conversation.can_manage_access,
                allow_guests=self.conversation.allow_guests,
            )

        sender_id = self.message.sender_id
        return SystemMessage(
            id=self.message.id,
            type=self.message.type,
            sender=lookup(sender_id) if sender_id is not None else None,
            users=tuple(lookup(i) for i in dict.fromkeys(self.message.user_ids)),
            conversation=conversation,
            text=self.message.text,
        )


class TextSpanResponse(BaseModel):
    start: int
    end: int
    attribute: SpanAttribute
    value: str

    model_config = {"from_attributes": True}


class FormattedTextResponse(BaseModel):
    text: str
    spans: list[TextSpanResponse]

    model_config = {"from_attributes": True}


class RenderResponse(BaseModel):
    action: str
    icon: ActionIcon
    heading: FormattedTextResponse | None
    title: FormattedTextResponse | None
    shown_user_ids: list[int]
    collapsed_user_ids: list[int]
    selected_user_ids: list[int]
    self_included: bool
    show_invite_button: bool
    show_more_url: str | None

    model_config = {"from_attributes": True}
