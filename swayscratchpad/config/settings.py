"""Application settings configuration."""

import logging
from dataclasses import dataclass
from typing import Optional

import yaml


@dataclass(frozen=True)
class WindowSettings:
    width: int = 500
    height: int = 400
    padding: int = 12
    title: str = "Select window to show"


@dataclass(frozen=True)
class ListSettings:
    icon_size: int = 48
    item_margin: int = 8
    placeholder_icon_size: int = 96


@dataclass(frozen=True)
class AppSettings:
    window: WindowSettings
    list: ListSettings
    log_level: str = "INFO"

    @property
    def logging_level(self) -> int:
        level = logging.getLevelName(str(self.log_level).upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(path)
        return cls(
            window=WindowSettings(
                width=config.get("width", 500),
                height=config.get("height", 400),
                padding=config.get("padding", 12),
                title=config.get("title", "Select window to show"),
            ),
            list=ListSettings(
                icon_size=config.get("icon_size", 48),
                item_margin=config.get("item_margin", 8),
                placeholder_icon_size=config.get("placeholder_icon_size", 96),
            ),
            log_level=config.get("log_level", "INFO"),
        )

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError:
            return {}
        return data if isinstance(data, dict) else {}
