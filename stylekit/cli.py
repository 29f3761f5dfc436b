"""
Command-line entry point

Reads a JSON mixin config and prints the resulting style blocks as JSON.
JSON null stands for an unset slot.

Usage:
    python -m stylekit expand responsive.json
    python -m stylekit grid layout.json --indent 0
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from stylekit.core.logging_config import get_logger, setup_logging
from stylekit.domain.blocks import StyleBlock
from stylekit.domain.breakpoints import UNSET
from stylekit.mixins.grid import grid_areas
from stylekit.mixins.responsive import expand
from stylekit.settings import SettingsError, get_settings
from stylekit.validation import ConfigError

logger = get_logger(__name__)


def _unset_nulls(value: Any) -> Any:
    if isinstance(value, list):
        return [UNSET if item is None else item for item in value]
    return value


def load_config(path: Path) -> dict[str, Any]:
    """
    Load a JSON config file.

    Raises:
        ConfigError: If the file is unreadable or not a JSON object
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must contain a JSON object")
    return data


def block_to_json(block: StyleBlock) -> dict[str, Any]:
    return {
        "condition": block.condition,
        "declarations": [[prop, value] for prop, value in block.declarations],
    }


def run_expand(config: dict[str, Any]) -> list[dict[str, Any]]:
    blocks = expand({key: _unset_nulls(value) for key, value in config.items()})
    return [block_to_json(block) for block in blocks]


def run_grid(config: dict[str, Any]) -> dict[str, Any]:
    layout = grid_areas(config.get("rows"), columns=config.get("columns"), gap=config.get("gap"))
    return {
        "container": block_to_json(layout.container),
        "areas": {name: block_to_json(block) for name, block in layout.areas.items()},
    }


COMMANDS = {
    "expand": run_expand,
    "grid": run_grid,
}


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(prog="stylekit", description="Expand style mixin shorthands into style blocks")

    parser.add_argument("command", choices=sorted(COMMANDS), help="Mixin to run")
    parser.add_argument("config", type=Path, help="Path to a JSON config file")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent for output (default: 2)")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code (0 on success, 1 on invalid config or settings)
    """
    args = parse_arguments(argv)

    try:
        settings = get_settings()
    except SettingsError as e:
        print(f"stylekit: {e}", file=sys.stderr)
        return 1
    setup_logging(level=settings.log_level, log_file=settings.log_file, json_output=settings.json_logs)

    try:
        config = load_config(args.config)
        result = COMMANDS[args.command](config)
    except ConfigError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(json.dumps(result, indent=args.indent or None))
    logger.info(f"{args.command} completed for {args.config}")
    return 0
