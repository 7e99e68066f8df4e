"""
Section commands: Edit the site document.

- update-section: normalize a raw field set (YAML/JSON) and merge it
- replace-section: replace one section with verbatim JSON
- replace-site: replace the whole document with verbatim JSON

Rejected input is reported and nothing is written.
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Awaitable, Callable

from rich.markup import escape

from folio.helpers.dto.normalization_dto import NormalizeResult, Rejected
from folio.helpers.exceptions import FolioError, MissingDocumentError
from folio.helpers.logging_helper import sanitize_exception_message
from folio.interfaces.cli.cli_ui import print_error, print_rejection, print_success
from folio.interfaces.cli.utils import config_from_args, load_raw_fields, read_text_arg
from folio.services.domain.content_svc import ContentService
from folio.services.infrastructure.cli_bootstrap_svc import get_content_service


def _run_edit(
    args: argparse.Namespace,
    edit: Callable[[ContentService], Awaitable[NormalizeResult]],
    done_message: str,
) -> int:
    service = get_content_service(config_from_args(args))
    try:
        result = asyncio.run(edit(service))
    except MissingDocumentError as e:
        print_error(f"{escape(str(e))}. Create it first with 'folio replace-site'.")
        return 1
    except (FolioError, OSError) as e:
        print_error(sanitize_exception_message(e, "Could not save the site document"))
        return 1

    if isinstance(result, Rejected):
        print_rejection(result.reason)
        return 1
    print_success(done_message)
    return 0


def cmd_update_section(args: argparse.Namespace) -> int:
    """Normalize a raw field set from a file and merge it into a section."""
    try:
        raw = load_raw_fields(args.file)
    except (OSError, ValueError) as e:
        print_error(escape(str(e)))
        return 1
    return _run_edit(
        args,
        lambda service: service.update_section(args.section, raw),
        f"Updated section '{escape(args.section)}'",
    )


def cmd_replace_section(args: argparse.Namespace) -> int:
    """Replace a section with the JSON object in a file."""
    try:
        raw_json = read_text_arg(args.file)
    except OSError as e:
        print_error(escape(str(e)))
        return 1
    enabled = not getattr(args, "disabled", False)
    return _run_edit(
        args,
        lambda service: service.replace_section(args.section, raw_json, enabled=enabled),
        f"Replaced section '{escape(args.section)}'",
    )


def cmd_replace_site(args: argparse.Namespace) -> int:
    """Replace the whole site document with the JSON object in a file."""
    try:
        raw_json = read_text_arg(args.file)
    except OSError as e:
        print_error(escape(str(e)))
        return 1
    return _run_edit(args, lambda service: service.replace_document(raw_json), "Replaced site document")
