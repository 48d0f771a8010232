"""Plain-text views of the form and the contact list."""
from __future__ import annotations

from typing import Iterable, List

from .form import FormState
from .models import Contact
from .store import StoreState

EMPTY_LIST_TEXT = "No contacts found."

_FIELD_LABELS = (
    ("name", "Name *"),
    ("email", "Email *"),
    ("phone", "Phone *"),
    ("message", "Message (Optional)"),
)


def render_contact(contact: Contact) -> str:
    lines = [f"[{contact.id}] {contact.name}", f"    {contact.email}", f"    {contact.phone}"]
    if contact.message:
        lines.append(f"    {contact.message}")
    return "\n".join(lines)


def render_contact_list(contacts: Iterable[Contact]) -> str:
    rendered = [render_contact(contact) for contact in contacts]
    if not rendered:
        return EMPTY_LIST_TEXT
    return "\n".join(rendered)


def submit_label(state: FormState) -> str:
    label = "Adding..." if state.submitting else "Add Contact"
    if not state.can_submit:
        label += " (disabled)"
    return label


def render_form(state: FormState) -> str:
    lines: List[str] = []
    for field_name, label in _FIELD_LABELS:
        lines.append(f"{label}: {state.draft.get(field_name)}")
        error = state.error_for(field_name)
        if error:
            lines.append(f"  ! {error}")
    lines.append(f"[{submit_label(state)}]")
    return "\n".join(lines)


def render_page(form_state: FormState, store_state: StoreState) -> str:
    sections = [
        "Contact Manager",
        "",
        "Add Contact",
        render_form(form_state),
        "",
        "Contacts",
        render_contact_list(store_state.contacts),
    ]
    return "\n".join(sections)
