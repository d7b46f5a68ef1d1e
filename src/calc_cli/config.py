import tomllib
from pathlib import Path
from typing import Any


class ConfigError(ValueError):
    """Raised when a .calc-lint.toml file cannot be used"""


class LintConfig:
    """Handles loading and validation of .calc-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.select: list[str] = []
        self.ignore: list[str] = []

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{path}: {e}") from e

        lint_data = data.get("tool", {}).get("calc-lint", {})
        self.select = self._string_list(path, lint_data, "select", self.select)
        self.ignore = self._string_list(path, lint_data, "ignore", self.ignore)

    @staticmethod
    def _string_list(path: Path, table: dict, key: str, default: list[str]) -> list[str]:
        value = table.get(key, default)
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"{path}: '{key}' must be a list of rule ids")
        return value

    def apply_to_registry(self, registry: Any) -> list[Any]:
        """Return list of enabled rules based on this config"""
        return registry.get_enabled_rules(select=self.select, ignore=self.ignore)
