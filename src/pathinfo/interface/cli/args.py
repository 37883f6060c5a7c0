from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into the options consumed by the application controller.
"""

import argparse
from typing import Any, Dict, Optional

from pathinfo.domain.path_models import PathKind
from pathinfo.domain.platform import PRESETS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the pathinfo CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="pathinfo",
        description="Decompose, validate and resolve filesystem path strings.",
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path string to analyse.",
    )

    # --- Resolution ---
    p.add_argument(
        "-b", "--base",
        dest="base_path",
        default=None,
        help="Absolute base directory used to resolve the path.",
    )

    # --- Shape Hint ---
    shape = p.add_mutually_exclusive_group()
    shape.add_argument(
        "--file",
        action="store_true",
        help="Require the path to denote a file.",
    )
    shape.add_argument(
        "--directory",
        action="store_true",
        help="Require the path to denote a directory.",
    )

    # --- Platform Selection ---
    p.add_argument(
        "-p", "--platform",
        dest="platform",
        choices=sorted(PRESETS),
        default=None,
        help="Path conventions to apply (default: host).",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_file",
        default=None,
        help="JSON file describing custom path conventions.",
    )
    p.add_argument(
        "--strict-config",
        action="store_true",
        help="Fail on malformed configuration values instead of coercing them.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective platform configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        dest="save_config",
        default=None,
        help="Write the effective platform configuration to a JSON file.",
    )

    # --- Filesystem Queries ---
    p.add_argument(
        "--exists",
        action="store_true",
        help="Check whether the (resolved) path exists on disk.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the result as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into controller options.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Options keyed by controller parameter name.
    """
    options: Dict[str, Any] = {
        "path": args.path,
        "base_path": _blank_as_none(args.base_path),
        "kind_hint": None,
        "config_overrides": {},
    }

    if args.file:
        options["kind_hint"] = PathKind.FILE
    elif args.directory:
        options["kind_hint"] = PathKind.DIRECTORY

    if args.platform:
        options["config_overrides"]["preset"] = args.platform

    return options

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _blank_as_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value
