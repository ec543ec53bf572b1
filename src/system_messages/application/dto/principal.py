from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """Authenticated caller identity extracted from JWT.

    The principal is the self-user of every snapshot it renders.
    """

    subject_id: int
    handle: str | None = None
