"""Configuration management for collinear-free N-Queens searches.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize search settings and the board sizes used by the sweep.

File format (high-level)
------------------------
- search_settings: collinearity mode ("slope" | "exact") and time limit in
  seconds (null = unlimited).
- sweep_settings: N_values counted by ``--sweep``.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load and query configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            try:
                config = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in {self.config_path}: {exc}") from exc
        if not isinstance(config, dict):
            raise ValueError(f"Top-level JSON value in {self.config_path} must be an object")
        return config

    def get_search_settings(self):
        """Return search settings (collinearity mode, time limit)."""
        return self.config.get("search_settings", {})

    def get_sweep_settings(self):
        """Return sweep settings (board sizes)."""
        return self.config.get("sweep_settings", {})
