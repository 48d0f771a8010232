"""Contact Manager: a form and a list backed by a remote contacts REST API."""
from __future__ import annotations

from .app import ContactManagerApp
from .client import ContactsAPIError, ContactsClient
from .config import ConfigError, Settings, load_settings
from .form import ContactFormController, FormState, SubmitOutcome
from .models import Contact, ContactCreateRequest, ContactDraft
from .store import ContactStore, StoreState
from .validation import validate_field

__all__ = [
    "ContactManagerApp",
    # Backend
    "ContactsAPIError",
    "ContactsClient",
    # Config
    "ConfigError",
    "Settings",
    "load_settings",
    # Controllers
    "ContactFormController",
    "FormState",
    "SubmitOutcome",
    "ContactStore",
    "StoreState",
    # Models
    "Contact",
    "ContactCreateRequest",
    "ContactDraft",
    "validate_field",
]
