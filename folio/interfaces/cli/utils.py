"""
CLI utility functions.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import yaml

from folio.services.infrastructure.cli_bootstrap_svc import get_config_service
from folio.services.infrastructure.config_svc import ConfigService


def config_from_args(args: argparse.Namespace) -> ConfigService:
    """Build a ConfigService with the global flags (--data-dir) applied on top of files."""
    overrides: dict[str, Any] = {}
    data_dir = getattr(args, "data_dir", None)
    if data_dir:
        overrides["data_dir"] = data_dir
    return get_config_service(overrides)


def read_text_arg(path: str) -> str:
    """Read a UTF-8 text file named on the command line."""
    return Path(path).read_text(encoding="utf-8")


def load_raw_fields(path: str) -> dict[str, Any]:
    """
    Load a raw field set from a YAML or JSON file.

    Files ending in .json are parsed as JSON, everything else as YAML.

    Raises:
        ValueError: the file does not hold a mapping or does not parse
        OSError: the file cannot be read
    """
    text = read_text_arg(path)
    try:
        if path.lower().endswith(".json"):
            loaded = json.loads(text)
        else:
            loaded = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot parse {path}: {e}") from e
    if not isinstance(loaded, dict):
        raise ValueError(f"{path} must contain a mapping of field names to values")
    return loaded
