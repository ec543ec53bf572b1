from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from system_messages.domain.entities.contact import AddressBookContact
from system_messages.domain.value_objects.enums import InviteChannel


class ContactSchema(BaseModel):
    name: str
    emails: list[str] = Field(default_factory=list)
    phone_numbers: list[str] = Field(default_factory=list)

    def to_domain(self) -> AddressBookContact:
        return AddressBookContact(
            name=self.name,
            emails=tuple(self.emails),
            phone_numbers=tuple(self.phone_numbers),
        )


class InviteRequest(BaseModel):
    contact: ContactSchema
    email: str | None = None
    phone_number: str | None = None

    @model_validator(mode="after")
    def _one_address(self) -> InviteRequest:
        if (self.email is None) == (self.phone_number is None):
            raise ValueError("Exactly one of email or phone_number is required")
        return self


class InviteResponse(BaseModel):
    channel: InviteChannel
    recipients: list[str]
    body: str
    url: str | None

    model_config = {"from_attributes": True}


class InviteChannelsResponse(BaseModel):
    email: bool
    sms: bool
