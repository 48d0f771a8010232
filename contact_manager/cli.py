"""Contact Manager CLI."""
from __future__ import annotations

import argparse
import logging
import sys

from .app import ContactManagerApp
from .config import ConfigError, Settings, load_settings
from .form import SubmitOutcome
from .render import render_contact_list, render_form


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contact-manager",
        description="Create, list and delete contacts on the contacts backend.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request details (DEBUG level).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show all contacts.")

    add_parser = subparsers.add_parser("add", help="Add a contact.")
    add_parser.add_argument("--name", default="", help="Contact name (required).")
    add_parser.add_argument("--email", default="", help="Email address (required).")
    add_parser.add_argument("--phone", default="", help="Phone number (required).")
    add_parser.add_argument("--message", default="", help="Optional note.")

    delete_parser = subparsers.add_parser("delete", help="Delete a contact by id.")
    delete_parser.add_argument("contact_id", help="Backend identifier of the contact.")

    subparsers.add_parser(
        "check-config",
        help="Print the resolved backend URL and client settings.",
    )

    return parser


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _print_warnings(app: ContactManagerApp) -> None:
    for warning in app.warnings():
        print(f"Warning: {warning}", file=sys.stderr)


def _cmd_list(app: ContactManagerApp) -> int:
    app.start()
    _print_warnings(app)
    print(render_contact_list(app.store.contacts))
    return 0


def _cmd_add(app: ContactManagerApp, *, name: str, email: str, phone: str, message: str) -> int:
    for field_name, value in (
        ("name", name),
        ("email", email),
        ("phone", phone),
        ("message", message),
    ):
        app.form.update_field(field_name, value)

    if not app.form.is_valid():
        print("Contact not added; fix the following:", file=sys.stderr)
        print(render_form(app.form.state), file=sys.stderr)
        return 1

    app.start()
    outcome = app.form.submit()
    _print_warnings(app)
    if outcome is SubmitOutcome.FAILED:
        return 1

    print(render_contact_list(app.store.contacts))
    return 0


def _cmd_delete(app: ContactManagerApp, contact_id: str) -> int:
    if not contact_id.strip():
        print("Contact id must not be blank.", file=sys.stderr)
        return 1

    app.start()
    if app.store.get(contact_id) is None and app.store.last_error is None:
        print(f"Contact {contact_id} not found in the current list.", file=sys.stderr)
    app.store.remove(contact_id)
    _print_warnings(app)
    print(render_contact_list(app.store.contacts))
    return 0


def _cmd_check_config(settings: Settings) -> int:
    print(f"API URL: {settings.api_url}")
    print(f"Timeout: {settings.timeout_seconds:g}s")
    print(f"Identifier field: {settings.id_field}")
    print(
        "Keep draft on failed create:",
        "yes" if settings.keep_draft_on_failure else "no",
    )
    print(f"Environment: {settings.environment}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    _configure_logging(settings, args.verbose)

    if args.command == "check-config":
        return _cmd_check_config(settings)

    app = ContactManagerApp(settings)
    try:
        if args.command == "list":
            return _cmd_list(app)
        if args.command == "add":
            return _cmd_add(
                app,
                name=args.name,
                email=args.email,
                phone=args.phone,
                message=args.message,
            )
        if args.command == "delete":
            return _cmd_delete(app, args.contact_id)
    finally:
        app.close()

    parser.error(f"Unknown command: {args.command}")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
