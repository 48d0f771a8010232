"""Wires the REST client, the contact store and the form controller together."""
from __future__ import annotations

from typing import List, Optional

from .client import ContactsClient
from .config import Settings, load_settings
from .form import ContactFormController
from .render import render_page
from .store import ContactStore


class ContactManagerApp:
    """One contact-manager session: a form plus the list it feeds."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[ContactsClient] = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.client = client or ContactsClient(self.settings)
        self.store = ContactStore(self.client)
        self.form = ContactFormController(
            self.client,
            on_created=self.store.refresh,
            keep_draft_on_failure=self.settings.keep_draft_on_failure,
        )

    def start(self) -> None:
        """Initial load of the contact list."""
        self.store.refresh()

    def render(self) -> str:
        return render_page(self.form.state, self.store.state)

    def warnings(self) -> List[str]:
        return [
            message
            for message in (self.form.state.last_error, self.store.last_error)
            if message
        ]

    def close(self) -> None:
        self.client.close()
