"""English string table."""
from __future__ import annotations

STRINGS: dict[str, str] = {
    "content.system.you_nominative": "you",
    "content.system.you_dative": "you",
    "content.system.you_accusative": "you",

    "content.system.conversation.started.heading": "{sender} started the conversation",
    "content.system.conversation.started.heading.you": "{sender} started the conversation",
    "content.system.conversation.started": "{sender} started a conversation",
    "content.system.conversation.started.you": "{sender} started a conversation",
    "content.system.conversation.started.with": "{sender} started a conversation with {names}",
    "content.system.conversation.started.with.you": "{sender} started a conversation with {names}",
    "content.system.conversation.added": "{sender} added {names}",
    "content.system.conversation.added.you": "{sender} added {names}",
    "content.system.conversation.added.self": "{sender} joined",
    "content.system.conversation.added.self.you": "{sender} joined",
    "content.system.conversation.removed": "{sender} removed {names}",
    "content.system.conversation.removed.you": "{sender} removed {names}",
    "content.system.conversation.left": "{sender} left",
    "content.system.conversation.left.you": "{sender} left",
    "content.system.conversation.team_member_left": "{sender} was removed from the team",
    "content.system.conversation.team_member_left.you": "{sender} were removed from the team",

    "content.system.names.separator": ", ",
    "content.system.names.pair_separator": " and ",
    "content.system.names.last_separator": ", and ",
    "content.system.names.others": "{count} others",

    "send_invitation.text": (
        "I’m on Wire. Search for {handle} or visit https://get.wire.com "
        "to connect with me."
    ),
    "send_invitation_no_email.text": (
        "I’m on Wire. Visit https://get.wire.com to connect with me."
    ),
}
