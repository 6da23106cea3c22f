"""Configuration loading utilities for aclparser.

Settings are read from a YAML file in addition to pydantic's environment
variable and dotenv support. ``YamlConfigSettingsSource`` supplies the YAML
layer and ``load_config`` locates the file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Type

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ..constants import CONFIG_FILE_NAME
from ..core.file_utils import find_project_root
from ..exceptions import ConfigError

if TYPE_CHECKING:
    from . import Settings


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A Pydantic settings source that loads variables from a YAML file.

    A missing file, unreadable file or invalid YAML contributes nothing, so
    defaults and environment variables still apply.
    """

    def __init__(self, settings_cls: Type[BaseSettings], yaml_file: Path | None):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._data: dict[str, Any] = {}
        if self.yaml_file and self.yaml_file.exists():
            try:
                loaded = yaml.safe_load(self.yaml_file.read_text(encoding="utf-8"))
            except (yaml.YAMLError, OSError) as exc:
                logging.warning("Ignoring unreadable config file %s: %s", self.yaml_file, exc)
                loaded = None
            if isinstance(loaded, dict):
                self._data = loaded

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


def load_config(path: Path | None = None) -> "Settings":
    """
    Load application settings from a YAML file and environment variables.

    When ``path`` is None, ``aclparser.yaml`` in the project root is used if
    it exists. Environment variables take precedence over the file.

    Raises:
        ConfigError: If the merged settings fail validation.
    """
    from . import Settings

    config_file = path
    if config_file is None:
        try:
            project_root = find_project_root()
            default_config_path = project_root / CONFIG_FILE_NAME
            if default_config_path.exists():
                config_file = default_config_path
        except FileNotFoundError:
            logging.debug(
                "Could not find project root marker 'pyproject.toml'. "
                "Default '%s' will not be loaded.",
                CONFIG_FILE_NAME,
            )
    try:
        return Settings(config_file=config_file)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
