"""Per-field validation rules for the contact form."""
from __future__ import annotations

import re

from .models import FORM_FIELDS

# Whitespace as browsers define it for String.prototype.trim() and \s.
# Differs from str.isspace(): includes U+FEFF, excludes U+001C-U+001F and U+0085.
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_NON_SPACE = f"[^{re.escape(JS_WHITESPACE)}]+"
EMAIL_PATTERN = re.compile(f"{_NON_SPACE}@{_NON_SPACE}\\.{_NON_SPACE}")

NAME_REQUIRED = "Name is required"
PHONE_REQUIRED = "Phone is required"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Invalid email format"


def _is_blank(value: str) -> bool:
    return not value.strip(JS_WHITESPACE)


def validate_field(field_name: str, value: str) -> str:
    """Return the error message for one field, or "" when the value is acceptable.

    Only ``name``, ``email`` and ``phone`` carry rules; ``message`` is free text.
    """
    if field_name not in FORM_FIELDS:
        raise ValueError(f"Unknown field: {field_name}")

    if field_name == "name" and _is_blank(value):
        return NAME_REQUIRED
    if field_name == "phone" and _is_blank(value):
        return PHONE_REQUIRED
    if field_name == "email":
        if _is_blank(value):
            return EMAIL_REQUIRED
        # Unanchored, same as a JS RegExp.test()
        if not EMAIL_PATTERN.search(value):
            return EMAIL_INVALID
    return ""
