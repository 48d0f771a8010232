"""Contact records, drafts, and the request model for creating contacts."""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel

FORM_FIELDS = ("name", "email", "phone", "message")
REQUIRED_FIELDS = ("name", "email", "phone")


@dataclass(frozen=True, slots=True)
class Contact:
    """A contact as stored by the backend."""
    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, id_field: str = "_id") -> Contact:
        """Build a Contact from a backend record.

        The identifier key is backend-defined; ``id`` is used when
        ``id_field`` is absent. A missing identifier decodes as "".
        """
        raw_id = data.get(id_field)
        if raw_id is None:
            raw_id = data.get("id")
        return cls(
            id="" if raw_id is None else str(raw_id),
            name=data.get("name") or "",
            email=data.get("email") or "",
            phone=data.get("phone") or "",
            message=data.get("message") or "",
        )


@dataclass(frozen=True, slots=True)
class ContactDraft:
    """In-progress form values; every field starts empty."""
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""

    def with_field(self, field_name: str, value: str) -> ContactDraft:
        if field_name not in FORM_FIELDS:
            raise ValueError(f"Unknown field: {field_name}")
        return replace(self, **{field_name: value})

    def get(self, field_name: str) -> str:
        if field_name not in FORM_FIELDS:
            raise ValueError(f"Unknown field: {field_name}")
        return getattr(self, field_name)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class ContactCreateRequest(BaseModel):
    """Body of ``POST /contacts``."""
    name: str
    email: str
    phone: str
    message: str = ""

    @classmethod
    def from_draft(cls, draft: ContactDraft) -> ContactCreateRequest:
        return cls(**draft.to_dict())


def find_contact(contacts: Iterable[Contact], contact_id: str) -> Optional[Contact]:
    return next((c for c in contacts if c.id == contact_id), None)
