"""Tests for per-field contact form validation."""
import pytest

from contact_manager.validation import (
    EMAIL_INVALID,
    EMAIL_REQUIRED,
    NAME_REQUIRED,
    PHONE_REQUIRED,
    validate_field,
)


class TestRequiredFields:
    """name and phone only need a non-blank value."""

    @pytest.mark.parametrize("value", ["Ana", "  Bo  ", "x"])
    def test_name_non_empty_is_clean(self, value):
        assert validate_field("name", value) == ""

    @pytest.mark.parametrize("value", ["", "   ", "\t\n"])
    def test_name_blank_is_required(self, value):
        assert validate_field("name", value) == NAME_REQUIRED == "Name is required"

    def test_phone_non_empty_is_clean(self):
        assert validate_field("phone", "555") == ""

    def test_phone_blank_is_required(self):
        assert validate_field("phone", " ") == PHONE_REQUIRED == "Phone is required"


class TestEmail:
    def test_empty_email_is_required(self):
        assert validate_field("email", "") == EMAIL_REQUIRED == "Email is required"

    def test_whitespace_email_is_required(self):
        assert validate_field("email", "   ") == EMAIL_REQUIRED

    @pytest.mark.parametrize("value", ["abc", "abc@", "a@b", "@b.co", "a b@c .d"])
    def test_malformed_email(self, value):
        assert validate_field("email", value) == EMAIL_INVALID == "Invalid email format"

    @pytest.mark.parametrize("value", ["a@b.co", "ana@x.com", "first.last@sub.example.org"])
    def test_well_formed_email(self, value):
        assert validate_field("email", value) == ""

    def test_pattern_is_unanchored(self):
        """Surrounding text does not fail the loose pattern."""
        assert validate_field("email", "mail me at a@b.co please") == ""


class TestOtherFields:
    def test_message_is_never_validated(self):
        assert validate_field("message", "") == ""
        assert validate_field("message", "anything at all") == ""

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="Unknown field"):
            validate_field("address", "123 Main St")


class TestBrowserWhitespace:
    """Blank and non-space checks follow browser trim()/\\s, not str.isspace()."""

    @pytest.mark.parametrize("value", ["\ufeff", "\u00a0\u3000", "\u2028\u202f\u205f"])
    def test_browser_whitespace_is_blank(self, value):
        assert validate_field("name", value) == NAME_REQUIRED
        assert validate_field("phone", value) == PHONE_REQUIRED
        assert validate_field("email", value) == EMAIL_REQUIRED

    @pytest.mark.parametrize("value", ["\x1c", "\x1f", "\x85"])
    def test_separator_controls_are_not_blank(self, value):
        assert validate_field("name", value) == ""

    def test_separator_control_counts_as_non_space_in_email(self):
        assert validate_field("email", "a\x1c@b.co") == ""

    def test_bom_ends_email_token(self):
        assert validate_field("email", "a@b.\ufeff") == EMAIL_INVALID
