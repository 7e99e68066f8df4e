"""
Show command: Inspect the site document.

Architecture:
- Uses CLI bootstrap service to get ContentService instance
- Reads only; never writes the document
"""

from __future__ import annotations

import argparse
import asyncio

from rich.markup import escape

from folio.interfaces.cli.cli_ui import InfoPanel, TableDisplay, print_error, print_json, print_warning
from folio.interfaces.cli.utils import config_from_args
from folio.interfaces.types.content_types import DocumentSummaryModel
from folio.services.infrastructure.cli_bootstrap_svc import get_content_service


async def _show(args: argparse.Namespace) -> int:
    service = get_content_service(config_from_args(args))
    document = await service.get_document()
    if document is None:
        print_error(f"No site document at {escape(str(service.store.path))}")
        return 1

    if args.section:
        if args.section not in document:
            print_warning(f"Section '{escape(args.section)}' is not in the document")
            return 1
        print_json(document[args.section])
        return 0

    if args.json:
        print_json(document)
        return 0

    summary = await service.summarize()
    if summary is not None:
        model = DocumentSummaryModel.from_dto(summary)
        content = "\n".join(f"[bold]{name}:[/bold] {value}" for name, value in model.model_dump(by_alias=True).items())
        InfoPanel.show("Site Overview", content)
    TableDisplay.show_sections(document)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """
    Show the document overview, a single section, or the whole document as JSON.
    """
    try:
        return asyncio.run(_show(args))
    except OSError as e:
        print_error(f"Error reading site document: {escape(str(e))}")
        return 1
