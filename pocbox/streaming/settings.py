"""Loading the application configuration from a YAML file."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from pathlib import Path

import yaml

from pocbox.streaming.models import AppConfiguration, app_configuration_from_mapping

CONFIG_NAME = "config"
CONFIG_EXTENSIONS = ("yaml", "yml")


class ConfigError(Exception):
    """Raised when the configuration cannot be found, read or understood."""


def _default_search_paths() -> list[Path]:
    try:
        project_root = Path(os.getcwd())
    except OSError as exc:
        raise ConfigError(f"failed to get working directory: {exc}") from exc
    return [project_root / "configs", Path("configs"), Path("../../configs")]


def _find_config(directories: Iterable[Path]) -> Path | None:
    for directory in directories:
        candidates = [directory / f"{CONFIG_NAME}.{ext}" for ext in CONFIG_EXTENSIONS]
        candidates.append(directory / CONFIG_NAME)
        for candidate in candidates:
            if candidate.is_file():
                return candidate
    return None


def load_config(search_paths: Iterable[str | os.PathLike[str]] | None = None) -> AppConfiguration:
    """Read the first ``config`` YAML file found in ``search_paths``.

    Without search paths, ``configs`` under the working directory, ``configs``
    and ``../../configs`` are tried in that order.
    """
    if search_paths is None:
        directories = _default_search_paths()
    else:
        directories = [Path(p) for p in search_paths]

    found = _find_config(directories)
    if found is None:
        searched = ", ".join(str(d) for d in directories)
        raise ConfigError(
            f"failed to read config file: {CONFIG_NAME!r} not found in [{searched}]"
        )

    try:
        data = yaml.safe_load(found.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"failed to read config file: {found} does not hold a mapping")

    try:
        return app_configuration_from_mapping(data)
    except ValueError as exc:
        raise ConfigError(f"failed to unmarshal config: {exc}") from exc