"""JSON configuration store.

The configuration file holds the ledger location, the debit and credit
category registries and a few parsing options::

    {
      "outputFilename": "ledger.db",
      "debitCategories": {"Dining": {"name": "Dining", "matches": ["^COFFEE SHOP"]}},
      "creditCategories": {}
    }
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from ledgerit.domain.category import CategoryRegistry
from ledgerit.domain.entities import FEE_MARKER
from ledgerit.domain.errors import ConfigError
from ledgerit.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config.json"


@dataclass
class Config:
    """Loaded configuration; ``raw`` keeps keys ledgerit does not interpret."""

    path: Path
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def output_filename(self) -> Optional[str]:
        value = self.raw.get("outputFilename")
        if not value:
            return None
        output = Path(value).expanduser()
        if not output.is_absolute():
            output = self.path.parent / output
        return str(output)

    @property
    def fee_marker(self) -> str:
        return self.raw.get("feeMarker") or FEE_MARKER

    @property
    def day_first(self) -> bool:
        return bool(self.raw.get("dayFirst", False))

    def build_registry(self) -> CategoryRegistry:
        """Build the category registry; empty sections give an empty registry.

        Raises:
            ValidationError: If a category pattern does not compile
        """
        return CategoryRegistry.from_config(
            self.raw.get("debitCategories"), self.raw.get("creditCategories")
        )

    def update_categories(self, registry: CategoryRegistry) -> None:
        self.raw.update(registry.to_config())


class ConfigStore:
    """Loads and saves the configuration file."""

    def __init__(self, path: Union[str, Path, None] = None):
        """Initialize configuration store.

        Args:
            path: Path to the JSON file. If None, checks the LEDGERIT_CONFIG
                environment variable, then defaults to ./config.json
        """
        if path is None:
            path = os.environ.get("LEDGERIT_CONFIG", DEFAULT_CONFIG_PATH)
        self.path = Path(path)

    def load(self) -> Config:
        """Read the configuration file.

        Raises:
            ConfigError: If the file is missing, unreadable or not a JSON object
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {self.path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read configuration {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration {self.path} must be a JSON object")
        for section in ("debitCategories", "creditCategories"):
            if data.get(section) is not None and not isinstance(data[section], dict):
                raise ConfigError(f"'{section}' in {self.path} must be an object")
        return Config(path=self.path, raw=data)

    def save(self, config: Config, registry: Optional[CategoryRegistry] = None) -> None:
        """Write the configuration, including registry changes when given.

        Raises:
            ConfigError: If the file cannot be written
        """
        if registry is not None:
            config.update_categories(registry)
        try:
            self.path.write_text(json.dumps(config.raw, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not write configuration {self.path}: {e}") from e
        if registry is not None:
            registry.mark_clean()
        logger.info("Saved configuration to %s", self.path)
