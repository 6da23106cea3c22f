from __future__ import annotations

import logging
from pathlib import Path

from ..exceptions import SourceError
from ..models import ACLConfig
from .acl_parser import parse_acl_config

logger = logging.getLogger(__name__)


def find_project_root(marker: str = "pyproject.toml") -> Path:
    """
    Find the project root by searching upwards for a marker file.
    """
    current_dir = Path(__file__).resolve().parent
    while True:
        if (current_dir / marker).exists():
            return current_dir
        if current_dir == current_dir.parent:  # Reached the filesystem root
            break
        current_dir = current_dir.parent
    raise FileNotFoundError(f"Project root marker '{marker}' not found.")


def read_acl_file(path: Path, encoding: str = "utf-8-sig") -> str:
    """
    Read an ACL4SSR document from disk.

    The default encoding drops a leading UTF-8 byte order mark, which some
    editors add to ``.ini`` files.

    Raises:
        SourceError: If the file is missing, unreadable or not valid text.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceError(f"ACL file not found: {path}")
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise SourceError(f"ACL file is not valid {encoding} text: {path}") from exc
    except OSError as exc:
        raise SourceError(f"Could not read ACL file {path}: {exc}") from exc


def load_acl_file(path: Path, encoding: str = "utf-8-sig") -> ACLConfig:
    """Read and parse an ACL4SSR document."""
    content = read_acl_file(path, encoding)
    logger.info("Loaded %s (%d bytes)", path, Path(path).stat().st_size)
    return parse_acl_config(content)
