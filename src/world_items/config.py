from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

_DEFAULTS_PKG = "world_items.data"
_DEFAULTS_FILE = "scan_defaults.yaml"


@dataclass(frozen=True)
class ScanConfig:
    """Tunables for :class:`WorldItemScanner`.

    Attributes:
        clutter_names: Object names treated as incidental world clutter
            (weeds, loose stone, twigs). Chests are never clutter.
        hay_item_id: Item id used when synthesizing hay from the silo count.
    """

    clutter_names: FrozenSet[str] = field(default_factory=lambda: frozenset({"Weeds", "Stone", "Twig"}))
    hay_item_id: str = "178"

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Scan config {path} is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Cannot read scan config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Scan config {path} must be a mapping, got {type(data).__name__}")
        return data

    @classmethod
    def _from_dict(cls, data: dict) -> "ScanConfig":
        names = data.get("clutter_names", [])
        if not isinstance(names, (list, tuple)):
            raise ConfigError("clutter_names must be a list of names")
        return cls(
            clutter_names=frozenset(str(n) for n in names),
            hay_item_id=str(data.get("hay_item_id", cls.hay_item_id)),
        )

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "ScanConfig":
        """Load settings from built-in defaults and an optional user override file.

        If user_path is provided and exists, its top-level keys replace the
        defaults.
        """
        try:
            with resources.files(_DEFAULTS_PKG).joinpath(_DEFAULTS_FILE).open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default scan config not found; falling back to dataclass defaults.")
            defaults = cls()
            default_data = {"clutter_names": sorted(defaults.clutter_names), "hay_item_id": defaults.hay_item_id}

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user scan config from %s", user_path)
            else:
                logger.warning("User scan config file not found: %s", user_path)

        merged = dict(default_data)
        merged.update(user_data)
        config = cls._from_dict(merged)
        logger.debug("Scan config merged: %s", config)
        return config


__all__ = ["ScanConfig"]
