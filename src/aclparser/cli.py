"""Command-line interface for aclparser.

This module provides the entry point for the `aclparser` command-line tool.
It uses `argparse` to define the subcommands (`parse`, `show`,
`merge-filters`), loads the application configuration, overrides settings
with command-line arguments and dispatches to the matching handler.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import Settings, load_config
from .core.file_utils import load_acl_file
from .core.regex_filters import (
    extract_surge_regex_filter,
    is_regex_proxy_pattern,
    merge_regex_filters,
)
from .exceptions import AclParserError, ConfigError
from .logging_config import setup_logging
from .output import render, write_output

logger = logging.getLogger(__name__)


def _add_parse_arguments(parser: argparse.ArgumentParser):
    """Add arguments for the 'parse' command."""
    parser.add_argument("file", help="Path to an ACL4SSR .ini file")
    group = parser.add_argument_group("output arguments")
    group.add_argument(
        "--format",
        dest="output_format",
        choices=("json", "yaml"),
        help="Output format (default from config: json)",
    )
    group.add_argument("--indent", type=int, help="Indentation width")
    group.add_argument(
        "--output",
        dest="output_file",
        metavar="FILE",
        help="Write the result to FILE instead of standard output",
    )


def _add_merge_filters_arguments(parser: argparse.ArgumentParser):
    """Add arguments for the 'merge-filters' command."""
    parser.add_argument(
        "patterns", nargs="+", metavar="PATTERN", help="Regex filters such as '(香港|HK)'"
    )
    parser.add_argument(
        "--surge",
        action="store_true",
        help="Print the alternation without parentheses, as Surge expects",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the main `argparse` parser with all subcommands and arguments."""
    parser = argparse.ArgumentParser(
        prog="aclparser", description="Inspect ACL4SSR rule and proxy group definitions"
    )
    parser.add_argument("--config", help="Path to aclparser.yaml")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        type=str.upper,
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_p = subparsers.add_parser("parse", help="Dump parsed rulesets and proxy groups")
    _add_parse_arguments(parse_p)

    show_p = subparsers.add_parser("show", help="Display parsed definitions as tables")
    show_p.add_argument("file", help="Path to an ACL4SSR .ini file")

    merge_p = subparsers.add_parser(
        "merge-filters", help="Merge regex proxy filters into one expression"
    )
    _add_merge_filters_arguments(merge_p)

    return parser


def _update_settings_from_args(cfg: Settings, args: argparse.Namespace):
    """Update the `Settings` object with values from parsed CLI arguments."""
    arg_dict = {k: v for k, v in vars(args).items() if v is not None}

    MAPPING = {
        "log_level": ("logging", "level"),
        "output_format": ("output", "format"),
        "indent": ("output", "indent"),
        "output_file": ("output", "output_file"),
    }

    for arg_name, (group, attr) in MAPPING.items():
        if (value := arg_dict.get(arg_name)) is not None:
            try:
                setattr(getattr(cfg, group), attr, value)
            except ValidationError as exc:
                raise ConfigError(f"Invalid value for --{arg_name.replace('_', '-')}: {value!r}") from exc


def _handle_parse(args: argparse.Namespace, cfg: Settings) -> int:
    """Handler for the 'parse' command."""
    config = load_acl_file(Path(args.file))
    text = render(config, cfg.output.format, cfg.output.indent)
    if cfg.output.output_file:
        write_output(text, cfg.output.output_file)
    else:
        print(text, end="")
    return 0


def _members_cell(proxies: List[str], has_wildcard: bool) -> str:
    members = [
        f"[cyan]{escape(proxy)}[/cyan]" if is_regex_proxy_pattern(proxy) else escape(proxy)
        for proxy in proxies
    ]
    if has_wildcard:
        members.insert(0, "[bold].*[/bold]")
    return ", ".join(members)


def _handle_show(args: argparse.Namespace, cfg: Settings) -> int:
    """Handler for the 'show' command."""
    console = Console()
    config = load_acl_file(Path(args.file))

    groups = Table(title="Proxy groups", show_header=True, header_style="bold magenta")
    groups.add_column("Name")
    groups.add_column("Type", style="dim")
    groups.add_column("Members")
    groups.add_column("Health check")
    groups.add_column("Interval", justify="right")
    groups.add_column("Tolerance", justify="right")
    for group in config.proxy_groups:
        groups.add_row(
            escape(group.name),
            escape(group.type),
            _members_cell(group.proxies, group.has_wildcard),
            escape(group.url) or "-",
            str(group.interval or "-"),
            str(group.tolerance or "-"),
        )

    rulesets = Table(title="Rulesets", show_header=True, header_style="bold magenta")
    rulesets.add_column("Group")
    rulesets.add_column("Rule")
    rulesets.add_column("Behavior", style="dim")
    rulesets.add_column("Interval", justify="right")
    for ruleset in config.rulesets:
        rulesets.add_row(
            escape(ruleset.group),
            escape(ruleset.rule_url),
            ruleset.behavior,
            str(ruleset.interval),
        )

    console.print(groups)
    console.print(rulesets)
    return 0


def _handle_merge_filters(args: argparse.Namespace, cfg: Settings) -> int:
    """Handler for the 'merge-filters' command."""
    for pattern in args.patterns:
        if not is_regex_proxy_pattern(pattern):
            logger.warning("%r is not a regex proxy pattern", pattern)
    if args.surge:
        print(extract_surge_regex_filter(args.patterns))
    else:
        print(merge_regex_filters(args.patterns))
    return 0


HANDLERS: Dict[str, Callable[[argparse.Namespace, Settings], int]] = {
    "parse": _handle_parse,
    "show": _handle_show,
    "merge-filters": _handle_merge_filters,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = load_config(Path(args.config) if args.config else None)
        _update_settings_from_args(cfg, args)
        try:
            setup_logging(cfg.logging.level, cfg.logging.log_file, cfg.logging.mask_tokens)
        except OSError as exc:
            raise ConfigError(f"Could not open log file {cfg.logging.log_file}: {exc}") from exc
        return HANDLERS[args.command](args, cfg)
    except AclParserError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
