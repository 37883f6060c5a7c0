from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, platform configuration
loading and validation, parsing, optional resolution against a base
directory, filesystem queries and result rendering.

Exit codes:
    0: the path is valid.
    1: the path is invalid.
    2: usage, configuration or precondition error.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from pathinfo.core.parser import parse
from pathinfo.core.resolver import resolve_against
from pathinfo.core.validator import validate_platform_config
from pathinfo.domain.config import load_platform_config_file, save_platform_config_file
from pathinfo.domain.path_models import StructuredPath
from pathinfo.domain.platform import PlatformConfig
from pathinfo.infra.fs import path_exists
from pathinfo.infra.logging import LoggingConfig, configure_logging, get_logger
from pathinfo.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)
    options = cli_args.args_to_options(args)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Platform configuration (file < CLI overrides)
    raw_conf: Dict[str, Any] = {}
    if args.config_file:
        raw_conf.update(load_platform_config_file(args.config_file))
    raw_conf.update(options["config_overrides"])

    try:
        config, warnings = validate_platform_config(raw_conf, strict=args.strict_config)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid platform configuration: {e}")
        print(f"ERROR: invalid platform configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        if not save_platform_config_file(args.save_config, config.to_dict()):
            print(f"ERROR: cannot write platform configuration to '{args.save_config}'.", file=sys.stderr)
            return EXIT_USAGE
        logger.info(f"Platform configuration saved to {args.save_config}")

    if args.dump_config:
        print(json.dumps(config.to_dict(), ensure_ascii=False, indent=2))
        return EXIT_VALID

    if options["path"] is None:
        if args.save_config:
            return EXIT_VALID
        parser.print_usage(sys.stderr)
        print("ERROR: a path is required.", file=sys.stderr)
        return EXIT_USAGE

    # 4. Parsing and resolution
    result = parse(options["path"], options["kind_hint"], config)
    logger.debug(f"Parsed {options['path']!r}: valid={result.is_valid}")

    # An invalid input is reported as such; only a bad base is a usage error
    if options["base_path"] is not None and result.is_valid:
        try:
            result = resolve_against(result, options["base_path"], config)
        except ValueError as e:
            logger.error(f"Resolution failed: {e}")
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_USAGE

    # 5. Filesystem query
    exists: Optional[bool] = None
    if args.exists:
        exists = path_exists(result)

    # 6. Output rendering phase
    if args.json_output:
        payload = result.to_dict()
        if exists is not None:
            payload["exists"] = exists
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, config, exists)

    return EXIT_VALID if result.is_valid else EXIT_INVALID

# -----------------------------------------------------------------------------
# OUTPUT RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: StructuredPath, config: PlatformConfig, exists: Optional[bool]) -> None:
    """Render a StructuredPath as aligned 'label: value' lines."""
    rows = [
        ("Path", result.path or "-"),
        ("Valid", _yes_no(result.is_valid)),
        ("Absolute", _yes_no(result.is_absolute)),
        ("Kind", result.kind.value),
        ("Separator", repr(result.directory_separator)),
        ("Volume", result.volume or "-"),
        ("Anchor", result.anchor or "-"),
        ("Directories", ", ".join(result.directories) or "-"),
        ("Filename", result.filename or "-"),
        ("Platform", config.name),
    ]
    if exists is not None:
        rows.append(("Exists", _yes_no(exists)))

    width = max(len(label) for label, _ in rows) + 1
    for label, value in rows:
        print(f"{(label + ':').ljust(width)} {value}")


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"
