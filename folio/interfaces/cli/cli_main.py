#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from folio.__version__ import __version__
from folio.components.normalization.section_specs_comp import SECTION_SPECS
from folio.helpers.dto.submission_dto import PATCHABLE_STATUSES
from folio.helpers.logging_helper import configure_logging
from folio.interfaces.cli.commands.section_cli import cmd_replace_section, cmd_replace_site, cmd_update_section
from folio.interfaces.cli.commands.show_cli import cmd_show
from folio.interfaces.cli.commands.submissions_cli import cmd_mark_submission, cmd_submissions
from folio.interfaces.cli.utils import config_from_args


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    sections = list(SECTION_SPECS)
    p = argparse.ArgumentParser(
        prog="folio",
        description="Folio - Portfolio site content and contact submissions",
        epilog="Examples:\n"
        "  folio show                                 # Overview of all sections\n"
        "  folio show hero                            # One section as JSON\n"
        "  folio update-section projects cards.yaml   # Normalize and merge form fields\n"
        "  folio replace-site site.json               # Replace the whole document\n"
        "  folio submissions --limit 20               # Latest contact submissions\n"
        "  folio mark-submission 4f0c... sent         # Record delivery outcome",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--data-dir", help="directory holding site.json and submissions.json (overrides config)")
    p.add_argument("--log-level", help="logging level (overrides config), e.g. DEBUG")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'folio <command> --help' for command-specific help)",
    )

    # show: Inspect the document
    s = sub.add_parser("show", help="Show the site overview, one section, or the whole document")
    s.add_argument("section", nargs="?", help="section to print as JSON")
    s.add_argument("--json", action="store_true", help="print the whole document as JSON")
    s.set_defaults(func=cmd_show)

    # update-section: Normalize and merge a raw field set
    s = sub.add_parser("update-section", help="Normalize a raw field set (YAML/JSON file) into a section")
    s.add_argument("section", choices=sections)
    s.add_argument("file", help="YAML or JSON file with the raw form fields")
    s.set_defaults(func=cmd_update_section)

    # replace-section: Verbatim section JSON
    s = sub.add_parser("replace-section", help="Replace a section with a JSON object from a file")
    s.add_argument("section", choices=sections)
    s.add_argument("file", help="JSON file with the section object")
    s.add_argument("--disabled", action="store_true", help="store the section hidden (enabled: false)")
    s.set_defaults(func=cmd_replace_section)

    # replace-site: Verbatim document JSON
    s = sub.add_parser("replace-site", help="Replace the whole site document with a JSON file")
    s.add_argument("file", help="JSON file with the full document (needs meta, hero, about)")
    s.set_defaults(func=cmd_replace_site)

    # submissions: List or show submissions
    s = sub.add_parser("submissions", help="List recent contact submissions")
    s.add_argument("--limit", type=_positive_int, default=10, help="how many to list (default: 10)")
    s.add_argument("--id", help="show one submission in full")
    s.set_defaults(func=cmd_submissions)

    # mark-submission: Patch delivery status
    s = sub.add_parser("mark-submission", help="Record the delivery outcome of a submission")
    s.add_argument("id")
    s.add_argument("status", choices=sorted(PATCHABLE_STATUSES))
    s.set_defaults(func=cmd_mark_submission)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging(args.log_level or config_from_args(args).get("log_level", "INFO"))

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
