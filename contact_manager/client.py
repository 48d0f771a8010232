"""Thin REST wrapper around the backend ``contacts`` resource."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib import parse as urlparse

import requests

from .config import Settings
from .models import Contact, ContactCreateRequest, ContactDraft

logger = logging.getLogger(__name__)


class ContactsAPIError(RuntimeError):
    """Raised for any failed call to the contacts backend.

    Connection errors and non-2xx responses are reported the same way;
    ``status_code`` is set only when the backend actually answered.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ContactsClient:
    """List, create and delete contacts over HTTP."""

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings
        self.base_url = settings.api_url.rstrip("/")
        self.timeout_seconds = settings.timeout_seconds
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def list_contacts(self) -> List[Contact]:
        """Return every contact the backend currently holds, in backend order."""
        payload = self._request("GET", "", expect_json=True)
        if not isinstance(payload, list):
            raise ContactsAPIError(
                f"Expected a JSON array from GET {self.base_url}, got {type(payload).__name__}"
            )
        return [
            Contact.from_dict(item, id_field=self.settings.id_field)
            for item in payload
            if isinstance(item, dict)
        ]

    def create_contact(self, draft: ContactDraft) -> Any:
        """POST the draft and return whatever the backend answered (may be None)."""
        body = ContactCreateRequest.from_draft(draft).model_dump()
        return self._request("POST", "", body=body)

    def delete_contact(self, contact_id: str) -> None:
        if not contact_id:
            raise ValueError("contact_id is required")
        self._request("DELETE", f"/{urlparse.quote(contact_id, safe='')}")

    def close(self) -> None:
        self.session.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Optional[Dict[str, Any]] = None,
        expect_json: bool = False,
    ) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            resp = self.session.request(
                method,
                url,
                json=body,
                headers={"Accept": "application/json"},
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise ContactsAPIError(f"Network error calling {method} {url}: {exc}") from exc

        if not resp.ok:
            detail = (resp.text or "")[:200]
            raise ContactsAPIError(
                f"Contacts API {method} {url} failed with status {resp.status_code}: {detail}",
                status_code=resp.status_code,
            )

        if not resp.content:
            if expect_json:
                raise ContactsAPIError(f"Empty response body from {method} {url}")
            return None

        try:
            return resp.json()
        except ValueError as exc:
            if expect_json:
                raise ContactsAPIError(f"Invalid JSON from {method} {url}: {exc}") from exc
            return None
