"""Command line entry: emit one record through a configured logger.

    veuvelog --level warning --name deploy "disk almost full"
"""
from __future__ import annotations
import argparse
from typing import List, Optional

from .core.context import LoggingContext
from .core.errors import ConfigError
from .core.levels import Level, parse_level
from .system.settings import Settings, configure


def _level(text: str) -> Level:
    try:
        return parse_level(text)
    except ConfigError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="veuvelog", description="Write a leveled log line to the console")
    parser.add_argument("message", nargs="+", help="Message words, joined with spaces")
    parser.add_argument("--name", default="cli", help="Logger name")
    parser.add_argument("--level", type=_level, default=Level.INFO, help="Record level (default INFO)")
    parser.add_argument("--threshold", type=_level, default=None, help="Handler threshold (default from settings)")
    parser.add_argument("--format", dest="template", default=None, help="Formatter template (rich output only)")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--rich", action="store_true", help="Render through rich")
    parser.add_argument("--config", default=None, help="Settings JSON file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load(args.config)
    if args.threshold is not None:
        settings.data.level = args.threshold.name
    if args.no_color:
        settings.data.color = False
    if args.rich:
        settings.data.rich = True
    if args.template:
        settings.data.template = args.template

    context = LoggingContext()
    logger = configure(args.name, settings, context)
    try:
        logger.log(args.level, tuple(args.message))
    finally:
        context.close()
    return 0
