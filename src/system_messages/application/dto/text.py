from __future__ import annotations

from dataclasses import dataclass

from system_messages.domain.value_objects.enums import SpanAttribute


@dataclass(frozen=True, slots=True)
class TextStyle:
    font: str | None = None
    bold_font: str | None = None
    large_font: str | None = None
    text_color: str | None = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.font, self.bold_font, self.large_font, self.text_color)


@dataclass(frozen=True, slots=True)
class TextSpan:
    start: int
    end: int
    attribute: SpanAttribute
    value: str


@dataclass(frozen=True, slots=True)
class FormattedText:
    """Plain text plus attribute ranges, the service's attributed string."""

    text: str
    spans: tuple[TextSpan, ...] = ()

    def spans_with(self, attribute: SpanAttribute) -> list[TextSpan]:
        return [s for s in self.spans if s.attribute == attribute]

    def substring(self, span: TextSpan) -> str:
        return self.text[span.start:span.end]
