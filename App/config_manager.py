"""Configuration persistence manager for the Dot Matrix Studio.

This module handles loading and saving of generator settings to/from JSON files.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from dot_matrix.utils import is_valid_color
from models import CONFIG_FILE, AppSettings, EmbedFormat


class ConfigManager:
    """Handles loading and saving of generator settings."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.dotmatrix_config.json)
        """
        self.config_path = config_path

    def load(self) -> AppSettings:
        """Load settings from file, returning defaults if not found.

        Returns:
            AppSettings with loaded or default values
        """
        settings = AppSettings()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Update settings with loaded values (fallback to defaults)
                for setting in fields(AppSettings):
                    if setting.name in data:
                        setattr(settings, setting.name, data[setting.name])
                self._check_values(settings)
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")
            settings = AppSettings()

        return settings

    @staticmethod
    def _check_values(settings: AppSettings):
        """Raise ValueError if a stored value cannot become a parameter set."""
        if not isinstance(settings.size_by_brightness, bool):
            raise ValueError(
                f"Invalid size_by_brightness {settings.size_by_brightness!r}"
            )
        for name in ("spacing", "dot_size"):
            value = getattr(settings, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Invalid {name} {value!r}")

        params = settings.to_params()
        if params.spacing <= 0 or params.base_dot_size <= 0:
            raise ValueError("Spacing and dot size must be positive")

        EmbedFormat(settings.embed_format)
        for color in (settings.custom_color, settings.background_color):
            if not is_valid_color(color):
                raise ValueError(f"Invalid color {color!r}")

    def save(self, settings: AppSettings) -> Tuple[bool, Optional[str]]:
        """Save settings to file.

        Args:
            settings: AppSettings to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(settings), f, indent=2)
            return True, None
        except Exception as e:
            return False, str(e)
