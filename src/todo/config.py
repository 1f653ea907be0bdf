"""
Configuration for the todo console.

Values are read from ``config/app_config.yaml`` unless another file is given
directly or through the ``TODO_APP_CONFIG`` environment variable.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .models import DEFAULT_PRIORITY, TodoItem
from .schemas import SeedItemSchema

CONFIG_ENV_VAR = "TODO_APP_CONFIG"


@dataclass
class Config:
    """Application settings"""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "logs/todo.log"

    # Display
    output_format: str = "text"

    # New todos
    default_priority: str = DEFAULT_PRIORITY

    # None means the built-in three item seed
    seed: Optional[List[SeedItemSchema]] = field(default=None)

    def seed_items(self) -> Optional[List[TodoItem]]:
        """Build fresh todos for the configured seed, or None for the default."""
        if self.seed is None:
            return None
        return [
            TodoItem.create(entry.name, completed=entry.completed, priority=entry.priority)
            for entry in self.seed
        ]

    @staticmethod
    def default_path() -> Path:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            return Path(env_path)
        project_root = Path(__file__).resolve().parents[2]
        return project_root / "config" / "app_config.yaml"

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from a YAML file.

        Args:
            config_path: settings file (defaults to :meth:`default_path`)

        Returns:
            Config: settings instance; defaults when the file does not exist
        """
        if config_path is None:
            config_path = cls.default_path()
        config_path = Path(config_path)

        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        log_data = yaml_data.get("log", {})
        display_data = yaml_data.get("display", {})
        defaults_data = yaml_data.get("defaults", {})
        seed_data = yaml_data.get("seed")

        seed = None
        if seed_data is not None:
            seed = [SeedItemSchema.model_validate(entry) for entry in seed_data]

        return cls(
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/todo.log"),
            output_format=display_data.get("format", "text"),
            default_priority=defaults_data.get("priority", DEFAULT_PRIORITY),
            seed=seed,
        )
