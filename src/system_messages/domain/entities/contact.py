from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AddressBookContact:
    name: str
    emails: tuple[str, ...] = ()
    phone_numbers: tuple[str, ...] = ()
