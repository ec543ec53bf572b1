"""Builds the heading and title of participants system messages.

Output is a ``FormattedText``: the rendered string plus attribute spans
(fonts, colour, bold names, the "N others" link) a client applies when
drawing the cell.
"""
from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import assert_never

from system_messages.application.dto.selection import NameList
from system_messages.application.dto.text import FormattedText, TextSpan, TextStyle
from system_messages.application.ports.localization import Localizer
from system_messages.domain.value_objects.action import (
    Added,
    ConversationAction,
    Left,
    NoAction,
    Removed,
    Started,
    TeamMemberLeft,
)
from system_messages.domain.value_objects.enums import SpanAttribute

_KEY_PREFIX = "content.system.conversation"

# (text, attribute, value) triples; attribute None means plain text.
Segment = tuple[str, SpanAttribute | None, str]


@dataclass
class _TextBuilder:
    parts: list[str] = field(default_factory=list)
    spans: list[TextSpan] = field(default_factory=list)
    length: int = 0

    def append(self, segment: Segment) -> None:
        text, attribute, value = segment
        if not text:
            return
        if attribute is not None:
            self.spans.append(TextSpan(self.length, self.length + len(text), attribute, value))
        self.parts.append(text)
        self.length += len(text)

    def build(self, base: list[tuple[SpanAttribute, str]]) -> FormattedText:
        whole = [TextSpan(0, self.length, attr, value) for attr, value in base]
        return FormattedText(text="".join(self.parts), spans=(*whole, *self.spans))


class ParticipantsStringFormatter:
    def __init__(self, style: TextStyle, localizer: Localizer, link_url: str) -> None:
        self._style = style
        self._localizer = localizer
        self._link_url = link_url

    def heading(
        self,
        sender_name: str,
        sender_is_self: bool,
        conversation_name: str,
    ) -> FormattedText:
        builder = _TextBuilder()
        template = self._template("started.heading", sender_is_self)
        self._fill(builder, template, {"sender": [self._bold(sender_name)]})
        builder.append(("\n", None, ""))
        builder.append((conversation_name, SpanAttribute.LARGE, self._style.large_font or ""))
        return builder.build(self._base_attributes())

    def title(
        self,
        sender_name: str,
        sender_is_self: bool,
        action: ConversationAction,
        names: NameList | None = None,
    ) -> FormattedText | None:
        key = self._title_key(action, names)
        if key is None:
            return None

        fields: dict[str, list[Segment]] = {"sender": [self._bold(sender_name)]}
        if names is not None:
            fields["names"] = self._name_segments(names)

        builder = _TextBuilder()
        self._fill(builder, self._template(key, sender_is_self), fields)
        return builder.build(self._base_attributes())

    def _title_key(self, action: ConversationAction, names: NameList | None) -> str | None:
        has_names = names is not None and bool(names.names or names.collapsed)
        match action:
            case NoAction():
                return None
            case Started():
                return "started.with" if has_names else "started"
            case Added(includes_self=True):
                return "added.self"
            case Added():
                return "added" if has_names else None
            case Removed():
                return "removed" if has_names else None
            case Left():
                return "left"
            case TeamMemberLeft():
                return "team_member_left"
            case _:
                assert_never(action)

    def _template(self, key: str, sender_is_self: bool) -> str:
        suffix = ".you" if sender_is_self else ""
        return self._localizer.localize(f"{_KEY_PREFIX}.{key}{suffix}")

    def _fill(
        self,
        builder: _TextBuilder,
        template: str,
        fields: dict[str, list[Segment]],
    ) -> None:
        for literal, name, _spec, _conversion in string.Formatter().parse(template):
            builder.append((literal, None, ""))
            if name is None:
                continue
            for segment in fields.get(name, []):
                builder.append(segment)

    def _name_segments(self, names: NameList) -> list[Segment]:
        items: list[Segment] = [self._bold(n) for n in names.names]
        if names.collapsed:
            others = self._localizer.localize(
                "content.system.names.others", count=str(names.collapsed),
            )
            items.append((others, SpanAttribute.LINK, self._link_url))

        if len(items) <= 1:
            return items

        separator = self._localizer.localize("content.system.names.separator")
        if len(items) == 2:
            last_separator = self._localizer.localize("content.system.names.pair_separator")
        else:
            last_separator = self._localizer.localize("content.system.names.last_separator")

        segments: list[Segment] = []
        for index, item in enumerate(items):
            if index == len(items) - 1:
                segments.append((last_separator, None, ""))
            elif index > 0:
                segments.append((separator, None, ""))
            segments.append(item)
        return segments

    def _bold(self, text: str) -> Segment:
        return (text, SpanAttribute.BOLD, self._style.bold_font or "")

    def _base_attributes(self) -> list[tuple[SpanAttribute, str]]:
        return [
            (SpanAttribute.FONT, self._style.font or ""),
            (SpanAttribute.COLOR, self._style.text_color or ""),
        ]


def formatter_for(
    style: TextStyle | None,
    localizer: Localizer,
    link_url: str,
) -> ParticipantsStringFormatter | None:
    """Return a formatter, or None when the style is incomplete."""
    if style is None or not style.is_complete:
        return None
    return ParticipantsStringFormatter(style, localizer, link_url)
