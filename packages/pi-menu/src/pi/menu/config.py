"""Configuration management for pi-menu. Stores settings at ~/.pi/menu.json.

Values come from three places, later ones winning: the dataclass defaults,
the JSON file under ``$PI_CONFIG_DIR`` and the ``PI_MENU_*`` environment
variables.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from pi.menu.decorators import BORDERS
from pi.menu.glyphs import available_fonts
from pi.menu.gradients import GRADIENTS

logger = logging.getLogger(__name__)

NO_BORDER = "none"
PLAIN_FONT = "plain"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_OVERRIDES = {
    "font": "PI_MENU_FONT",
    "border": "PI_MENU_BORDER",
    "log_level": "PI_MENU_LOG_LEVEL",
}


@dataclass
class MenuConfig:
    font: str = "mono12"
    border: str = "double"
    gradient: str = "default"
    frame_interval: float = 0.05
    top_padding: int = 1
    log_level: str = "WARNING"

    def validate(self) -> None:
        """Raise ``ValueError`` if any field holds an unusable value."""
        if self.font != PLAIN_FONT and self.font not in available_fonts():
            raise ValueError(f"Unknown font: {self.font!r}")
        if self.border != NO_BORDER and self.border not in BORDERS:
            raise ValueError(f"Unknown border: {self.border!r}")
        if self.gradient not in GRADIENTS:
            raise ValueError(f"Unknown gradient: {self.gradient!r}")
        if self.frame_interval < 0:
            raise ValueError("frame_interval must not be negative")
        if self.top_padding < 0:
            raise ValueError("top_padding must not be negative")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def border_enabled(self) -> bool:
        return self.border != NO_BORDER

    @property
    def plain_titles(self) -> bool:
        return self.font == PLAIN_FONT


def config_from_dict(data: dict) -> MenuConfig:
    """Build a config from a JSON-compatible dict, ignoring unknown keys."""
    known = {f.name for f in fields(MenuConfig)}
    config = MenuConfig(**{k: v for k, v in data.items() if k in known})
    config.frame_interval = float(config.frame_interval)
    config.top_padding = int(config.top_padding)
    return config


def config_to_dict(config: MenuConfig) -> dict:
    return asdict(config)


def _get_config_dir() -> Path:
    return Path(os.environ.get("PI_CONFIG_DIR", Path.home() / ".pi"))


def get_config_path() -> Path:
    return _get_config_dir() / "menu.json"


def _read_file(config_path: Path) -> MenuConfig:
    if not config_path.exists():
        return MenuConfig()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level value must be an object")
        config = config_from_dict(data)
        config.validate()
        return config
    except (OSError, AttributeError, TypeError, ValueError) as e:
        logger.error("Error reading config %s: %s", config_path, e)
        return MenuConfig()


def _apply_env(config: MenuConfig) -> None:
    for field_name, env_name in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if not value:
            continue
        previous = getattr(config, field_name)
        setattr(config, field_name, value.upper() if field_name == "log_level" else value.lower())
        try:
            config.validate()
        except ValueError as e:
            logger.warning("Ignoring %s: %s", env_name, e)
            setattr(config, field_name, previous)


def load_config(path: Path | None = None) -> MenuConfig:
    """Load the menu config; a missing or malformed file yields the defaults."""
    config = _read_file(path or get_config_path())
    _apply_env(config)
    return config


def save_config(config: MenuConfig, path: Path | None = None) -> Path:
    """Validate and write *config* as JSON; returns the path written."""
    config.validate()
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(json.dumps(config_to_dict(config), indent=2), encoding="utf-8")
    logger.info("Saved menu config to %s", config_path)
    return config_path
