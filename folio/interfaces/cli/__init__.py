"""
Cli package.
"""

from .cli_ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    TableDisplay,
    print_error,
    print_info,
    print_json,
    print_rejection,
    print_success,
    print_warning,
)
from .utils import config_from_args, load_raw_fields

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "InfoPanel",
    "TableDisplay",
    "config_from_args",
    "load_raw_fields",
    "print_error",
    "print_info",
    "print_json",
    "print_rejection",
    "print_success",
    "print_warning",
]
