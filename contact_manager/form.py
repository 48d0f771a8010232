"""Form state machine: draft values, per-field errors, and submission.

Each event produces a new ``FormState`` from the previous one:

* ``apply_field_change`` - a keystroke in one field
* ``begin_submit`` - the create request is about to be issued
* ``finish_submit`` - the create request completed (either way)

``ContactFormController`` holds the current snapshot and performs the I/O.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import logging
from typing import Callable, Dict, Optional

from .client import ContactsAPIError, ContactsClient
from .models import REQUIRED_FIELDS, ContactDraft
from .validation import validate_field

logger = logging.getLogger(__name__)


class SubmitOutcome(str, Enum):
    SKIPPED = "skipped"
    CREATED = "created"
    FAILED = "failed"


@dataclass(frozen=True)
class FormState:
    draft: ContactDraft = field(default_factory=ContactDraft)
    # field name -> message; "" means validated and clean, absent means untouched
    errors: Dict[str, str] = field(default_factory=dict)
    submitting: bool = False
    last_error: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return all(self.draft.get(name) for name in REQUIRED_FIELDS) and not any(
            self.errors.get(name) for name in REQUIRED_FIELDS
        )

    @property
    def can_submit(self) -> bool:
        return self.is_valid and not self.submitting

    def error_for(self, field_name: str) -> str:
        return self.errors.get(field_name, "")


def apply_field_change(state: FormState, field_name: str, value: str) -> FormState:
    draft = state.draft.with_field(field_name, value)
    errors = dict(state.errors)
    if field_name in REQUIRED_FIELDS:
        errors[field_name] = validate_field(field_name, value)
    return replace(state, draft=draft, errors=errors)


def begin_submit(state: FormState) -> FormState:
    return replace(state, submitting=True, last_error=None)


def finish_submit(
    state: FormState,
    *,
    error: Optional[str] = None,
    keep_draft: bool = False,
) -> FormState:
    draft = state.draft if keep_draft else ContactDraft()
    return replace(state, draft=draft, submitting=False, last_error=error)


class ContactFormController:
    """Drives the contact form against the backend create endpoint."""

    def __init__(
        self,
        client: ContactsClient,
        *,
        on_created: Optional[Callable[[], object]] = None,
        keep_draft_on_failure: bool = False,
    ) -> None:
        self.client = client
        self.on_created = on_created
        self.keep_draft_on_failure = keep_draft_on_failure
        self._state = FormState()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def draft(self) -> ContactDraft:
        return self._state.draft

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._state.errors)

    @property
    def submitting(self) -> bool:
        return self._state.submitting

    def update_field(self, field_name: str, value: str) -> FormState:
        self._state = apply_field_change(self._state, field_name, value)
        return self._state

    def is_valid(self) -> bool:
        return self._state.is_valid

    def can_submit(self) -> bool:
        return self._state.can_submit

    def reset(self) -> None:
        self._state = FormState()

    def submit(self) -> SubmitOutcome:
        """Create a contact from the draft.

        Invalid drafts are ignored without touching the network. Once the
        request completes the draft is cleared, even when the create failed
        (unless ``keep_draft_on_failure`` is set). Failures are logged and
        recorded on the state, never raised.
        """
        if not self.is_valid():
            return SubmitOutcome.SKIPPED

        draft = self._state.draft
        self._state = begin_submit(self._state)
        try:
            self.client.create_contact(draft)
        except ContactsAPIError as exc:
            logger.error(f"Error adding contact: {exc}")
            self._state = finish_submit(
                self._state,
                error=f"Error adding contact: {exc}",
                keep_draft=self.keep_draft_on_failure,
            )
            return SubmitOutcome.FAILED

        logger.info(f"Created contact {draft.name!r}")
        self._state = finish_submit(self._state)
        if self.on_created is not None:
            self.on_created()
        return SubmitOutcome.CREATED
