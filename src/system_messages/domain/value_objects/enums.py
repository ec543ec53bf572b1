from __future__ import annotations

from enum import StrEnum


class SystemMessageType(StrEnum):
    PARTICIPANTS_ADDED = "participants_added"
    PARTICIPANTS_REMOVED = "participants_removed"
    NEW_CONVERSATION = "new_conversation"
    TEAM_MEMBER_LEAVE = "team_member_leave"
    OTHER = "other"


class ActionIcon(StrEnum):
    CONVERSATION = "conversation"
    PLUS = "plus"
    MINUS = "minus"


class GrammaticalCase(StrEnum):
    NOMINATIVE = "nominative"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"


class InviteChannel(StrEnum):
    EMAIL = "email"
    SMS = "sms"


class SpanAttribute(StrEnum):
    FONT = "font"
    BOLD = "bold"
    LARGE = "large"
    COLOR = "color"
    LINK = "link"
