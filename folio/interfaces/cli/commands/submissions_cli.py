"""
Submission commands: Inspect the submission log and record delivery outcomes.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from pydantic import ValidationError
from rich.markup import escape

from folio.helpers.dto.submission_dto import SUBMISSION_FIELDS
from folio.helpers.exceptions import FolioError, InvalidSubmissionStatusError
from folio.helpers.logging_helper import sanitize_exception_message
from folio.interfaces.cli.cli_ui import (
    STATUS_COLORS,
    InfoPanel,
    TableDisplay,
    print_error,
    print_success,
    print_warning,
)
from folio.interfaces.cli.utils import config_from_args
from folio.interfaces.types.submission_types import SubmissionRecord
from folio.services.infrastructure.cli_bootstrap_svc import get_submission_service

logger = logging.getLogger(__name__)


def _show_one(record: SubmissionRecord) -> None:
    status = record.status.value
    color = STATUS_COLORS.get(status, "white")
    content = f"""[bold]From:[/bold] {escape(record.name)} <{escape(record.email)}>
[bold]Subject:[/bold] {escape(record.subject)}
[bold]Received:[/bold] {escape(record.created_at)}
[bold]Status:[/bold] [{color}]{status}[/{color}]

{escape(record.message)}"""

    # Lifecycle extras written by delivery (e.g. an error message)
    extras = {k: v for k, v in record.to_record().items() if k not in SUBMISSION_FIELDS}
    if extras:
        content += "\n\n" + "\n".join(f"[dim]{escape(k)}:[/dim] {escape(str(v))}" for k, v in sorted(extras.items()))
    InfoPanel.show(f"Submission {escape(record.id)}", content)


async def _submissions(args: argparse.Namespace) -> int:
    service = get_submission_service(config_from_args(args))

    if args.id:
        raw = await service.get(args.id)
        if raw is None:
            print_error(f"Submission {escape(args.id)} not found")
            return 1
        try:
            _show_one(SubmissionRecord.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"[submissions] Malformed record {args.id}: {e}")
            print_error(f"Submission {escape(args.id)} is malformed")
            return 1
        return 0

    records = await service.recent(args.limit)
    if not records:
        print_warning("No submissions yet")
        return 0

    total = await service.count()
    TableDisplay.show_submissions(records, title=f"Submissions ({len(records)} of {total}, newest first)")
    return 0


def cmd_submissions(args: argparse.Namespace) -> int:
    """List recent submissions, or show one in full with --id."""
    try:
        return asyncio.run(_submissions(args))
    except OSError as e:
        print_error(f"Error reading submissions: {escape(str(e))}")
        return 1


def cmd_mark_submission(args: argparse.Namespace) -> int:
    """Move a submission to a delivery status (sent, send_failed, email_not_configured)."""
    service = get_submission_service(config_from_args(args))
    try:
        patched = asyncio.run(service.mark_status(args.id, args.status))
    except InvalidSubmissionStatusError as e:
        print_error(escape(str(e)))
        return 1
    except (FolioError, OSError) as e:
        print_error(sanitize_exception_message(e, "Could not update the submission log"))
        return 1

    if not patched:
        print_warning(f"Submission {escape(args.id)} is not in the log (evicted or unknown); nothing changed")
        return 1
    print_success(f"Submission {escape(args.id)} marked {escape(args.status)}")
    return 0
