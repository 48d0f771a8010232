"""In-memory contact list kept in sync with the backend by full refreshes."""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Iterable, Optional, Tuple

from .client import ContactsAPIError, ContactsClient
from .models import Contact, find_contact

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StoreState:
    """Snapshot of the displayed list."""
    contacts: Tuple[Contact, ...] = ()
    last_error: Optional[str] = None


def apply_refresh(state: StoreState, contacts: Iterable[Contact]) -> StoreState:
    """Replace the list wholesale. Entries without an id are never displayed."""
    kept = []
    for contact in contacts:
        if not contact.id:
            logger.warning(f"Dropping contact without an id: {contact.name!r}")
            continue
        kept.append(contact)
    return StoreState(contacts=tuple(kept), last_error=None)


def record_failure(state: StoreState, message: str) -> StoreState:
    return replace(state, last_error=message)


class ContactStore:
    """Holds the current contact list; every mutation goes through the backend."""

    def __init__(self, client: ContactsClient) -> None:
        self.client = client
        self._state = StoreState()

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def contacts(self) -> Tuple[Contact, ...]:
        return self._state.contacts

    @property
    def last_error(self) -> Optional[str]:
        return self._state.last_error

    def get(self, contact_id: str) -> Optional[Contact]:
        return find_contact(self._state.contacts, contact_id)

    def refresh(self) -> StoreState:
        """Re-fetch the full list. On failure the previous list stays in place."""
        try:
            contacts = self.client.list_contacts()
        except ContactsAPIError as exc:
            logger.warning(f"Error fetching contacts: {exc}")
            self._state = record_failure(self._state, f"Error fetching contacts: {exc}")
            return self._state

        self._state = apply_refresh(self._state, contacts)
        logger.debug(f"Loaded {len(self._state.contacts)} contacts")
        return self._state

    def remove(self, contact_id: str) -> StoreState:
        """Delete one contact, then refresh exactly once whatever the delete outcome."""
        delete_error: Optional[str] = None
        try:
            self.client.delete_contact(contact_id)
            logger.info(f"Deleted contact {contact_id}")
        except (ContactsAPIError, ValueError) as exc:
            logger.warning(f"Error deleting contact {contact_id}: {exc}")
            delete_error = f"Error deleting contact: {exc}"

        self.refresh()
        if delete_error and self._state.last_error is None:
            self._state = record_failure(self._state, delete_error)
        return self._state
