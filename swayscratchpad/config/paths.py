"""Application paths configuration."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    config_path: Path

    @classmethod
    def default(cls) -> "AppPaths":
        config_home = os.environ.get("XDG_CONFIG_HOME")
        base = Path(config_home) if config_home else Path.home() / ".config"

        return cls(config_path=base / "swayscratchpad" / "settings.yml")
