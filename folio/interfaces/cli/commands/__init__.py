"""
Commands package.
"""

from .section_cli import cmd_replace_section, cmd_replace_site, cmd_update_section
from .show_cli import cmd_show
from .submissions_cli import cmd_mark_submission, cmd_submissions

__all__ = [
    "cmd_mark_submission",
    "cmd_replace_section",
    "cmd_replace_site",
    "cmd_show",
    "cmd_submissions",
    "cmd_update_section",
]
