"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from system_messages.application.dto.principal import Principal
from system_messages.application.ports.auth import TokenVerifier
from system_messages.application.ports.composer import InviteComposer
from system_messages.application.ports.localization import Localizer
from system_messages.config import settings
from system_messages.infrastructure.auth.hs256_verifier import HS256Verifier
from system_messages.infrastructure.compose.url_composer import UrlSchemeComposer
from system_messages.infrastructure.localization.catalog import StringCatalog

_bearer_scheme = HTTPBearer()

_verifier: TokenVerifier | None = None
_localizer: Localizer | None = None


def get_verifier() -> TokenVerifier:
    global _verifier  # noqa: PLW0603
    if _verifier is None:
        _verifier = HS256Verifier(settings.JWT_SECRET, settings.JWT_ALGORITHM)
    return _verifier


def get_localizer() -> Localizer:
    global _localizer  # noqa: PLW0603
    if _localizer is None:
        _localizer = StringCatalog.for_locale(settings.LOCALE)
    return _localizer


def get_composer() -> InviteComposer:
    return UrlSchemeComposer(
        email_enabled=settings.INVITE_EMAIL_ENABLED,
        sms_enabled=settings.INVITE_SMS_ENABLED,
    )


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(_bearer_scheme)],
) -> Principal:
    verifier = get_verifier()
    try:
        return await verifier.verify(credentials.credentials)
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
LocalizerDep = Annotated[Localizer, Depends(get_localizer)]
ComposerDep = Annotated[InviteComposer, Depends(get_composer)]
