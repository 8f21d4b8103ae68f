"""YAML configuration loading with include directive support."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import yaml
from platformdirs import user_config_dir
from pydantic_settings import BaseSettings, YamlConfigSettingsSource

from buildchat.core.log import logger

DEFAULTS_FILE = Path(__file__).parent.parent / "defaults" / "default.yaml"
PROJECT_FILE = "buildchat.yaml"


def cli_includes(argv: list[str] | None = None) -> list[str]:
    """Collect the values of every --include argument."""
    argv = sys.argv if argv is None else argv
    includes = []
    i = 1
    while i < len(argv):
        if argv[i] == "--include" and i + 1 < len(argv):
            includes.append(argv[i + 1])
            i += 1
        i += 1
    return includes


class YamlWithIncludesSettingsSource(YamlConfigSettingsSource):
    """YAML settings source honouring include: and --include.

    Sources are deep merged in this order, later ones winning:
    package defaults < user config < project config < yaml_file
    argument < --include files.
    """

    def __init__(
        self, settings_cls: type[BaseSettings], yaml_file=None
    ):
        base = yaml_file or settings_cls.model_config.get("yaml_file")
        includes = cli_includes()
        if base and includes:
            yaml_file = (
                [base] if isinstance(base, (str, os.PathLike)) else list(base)
            ) + includes
        elif includes:
            yaml_file = includes
        else:
            yaml_file = base

        super().__init__(settings_cls, yaml_file)

    def _read_files(self, files, deep_merge: bool = True):  # noqa: ARG002
        """Load and deep-merge every configuration file that exists.

        Args:
            files: Explicit file path(s), lowest to highest priority
            deep_merge: Accepted for pydantic-settings compatibility;
                files are always deep merged

        Returns:
            Deep-merged dictionary of all loaded data
        """
        files_to_load = [
            DEFAULTS_FILE,
            Path(user_config_dir("buildchat", appauthor=False)) / PROJECT_FILE,
        ]
        if isinstance(files, (str, os.PathLike)):
            files = [files]
        explicit = [Path(f).expanduser() for f in files or []]
        if Path(PROJECT_FILE) not in explicit:
            files_to_load.append(Path(PROJECT_FILE))
        files_to_load.extend(explicit)

        result = {}
        for file_path in files_to_load:
            if file_path.is_file():
                logger.debug("Loading configuration", file=str(file_path))
                data = self._load_file_recursive(file_path, set())
                result = self._deep_merge(result, data)
            else:
                logger.debug(
                    "Configuration file not found (skipping)",
                    file=str(file_path),
                )
        return result

    def _load_file_recursive(
        self, filepath: Path, visited: set[Path]
    ) -> dict:
        """Load a file, resolving include: directives depth first.

        Raises:
            ValueError: If a file includes itself, directly or not, or
                its top level is not a mapping
        """
        filepath = filepath.resolve()
        if filepath in visited:
            raise ValueError(f"Circular include: {filepath}")
        visited.add(filepath)

        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{filepath} does not contain a mapping")

        includes = data.pop("include", None) or []
        if isinstance(includes, str):
            includes = [includes]

        merged = {}
        for inc in includes:
            inc_path = self._resolve_path(inc, filepath)
            merged = self._deep_merge(
                merged, self._load_file_recursive(inc_path, visited.copy())
            )
        # The including file wins over what it includes
        return self._deep_merge(merged, data)

    @staticmethod
    def _resolve_path(include_path: str, relative_to: Path) -> Path:
        path = Path(include_path).expanduser()
        if path.is_absolute():
            return path
        return (relative_to.parent / path).resolve()

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge override into base (override wins)."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
