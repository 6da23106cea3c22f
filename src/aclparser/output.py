"""Serialization of parse results.

The rendered document is a plain dump of the parsed rulesets and proxy
groups, meant for inspection or for tools in other languages. It is not a
Clash or Surge configuration.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml

from .exceptions import OutputError
from .models import ACLConfig

logger = logging.getLogger(__name__)


def to_serializable(config: ACLConfig) -> Dict[str, Any]:
    """Convert a parse result into plain dicts and lists."""
    return {
        "rulesets": [ruleset.to_dict() for ruleset in config.rulesets],
        "proxy_groups": [group.to_dict() for group in config.proxy_groups],
    }


def render(config: ACLConfig, fmt: str = "json", indent: int = 2) -> str:
    """
    Render a parse result as JSON or YAML.

    Non-ASCII group names (emoji, CJK) are written as-is.

    Raises:
        OutputError: If ``fmt`` is not ``json`` or ``yaml``.
    """
    data = to_serializable(config)
    if fmt == "json":
        return json.dumps(data, ensure_ascii=False, indent=indent) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(
            data, allow_unicode=True, sort_keys=False, indent=indent or None
        )
    raise OutputError(f"Unsupported output format: {fmt}")


def write_output(text: str, path: Path) -> Path:
    """Write rendered output to ``path``, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Could not write {path}: {exc}") from exc
    logger.info("Wrote %s", path)
    return path
