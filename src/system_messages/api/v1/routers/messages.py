from __future__ import annotations

from fastapi import APIRouter

from system_messages.api.deps import CurrentPrincipal, LocalizerDep
from system_messages.api.v1.schemas.system_message import RenderRequest, RenderResponse
from system_messages.application.dto.text import TextStyle
from system_messages.config import settings
from system_messages.infrastructure.text.participants_formatter import formatter_for
from system_messages.services import system_message_service
from system_messages.services.display_names import ConversationDisplayNames
from system_messages.services.participants_cell import SHOW_MORE_LINK_URL

router = APIRouter(prefix="/api/v1/system-messages", tags=["system-messages"])


def _default_style() -> TextStyle:
    return TextStyle(
        font=settings.DEFAULT_FONT,
        bold_font=settings.DEFAULT_BOLD_FONT,
        large_font=settings.DEFAULT_LARGE_FONT,
        text_color=settings.DEFAULT_TEXT_COLOR,
    )


@router.post("/render", response_model=RenderResponse)
async def render_system_message(
    body: RenderRequest,
    principal: CurrentPrincipal,
    localizer: LocalizerDep,
) -> RenderResponse:
    message = body.to_domain(principal.subject_id)
    style = body.style.to_domain() if body.style is not None else _default_style()
    rendered = system_message_service.render(
        message,
        ConversationDisplayNames(localizer),
        formatter_for(style, localizer, SHOW_MORE_LINK_URL),
    )
    return RenderResponse.model_validate(rendered, from_attributes=True)
