"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.models import SlotDuration, WallClock


class PersonConfig(BaseModel):
    """One person's default working window."""
    name: str
    timezone: str
    start: str = "09:00"
    end: str = "17:00"

    @field_validator("start", "end")
    @classmethod
    def validate_wall_clock(cls, value: str) -> str:
        """Ensure times are HH:MM."""
        return str(WallClock.parse(value))


def _default_people() -> List[PersonConfig]:
    return [
        PersonConfig(name="Person 1", timezone="Europe/Stockholm"),
        PersonConfig(name="Person 2", timezone="America/Chicago"),
    ]


class AppConfig(BaseModel):
    """Application configuration."""
    people: List[PersonConfig] = Field(default_factory=_default_people)
    slot_durations: List[int] = Field(
        default_factory=lambda: [int(d) for d in SlotDuration]
    )
    log_level: str = "WARNING"

    @field_validator("people")
    @classmethod
    def validate_people(cls, value: List[PersonConfig]) -> List[PersonConfig]:
        """Exactly two people are compared."""
        if len(value) != 2:
            raise ValueError(f"people must contain exactly 2 entries, got {len(value)}")
        return value

    @field_validator("slot_durations")
    @classmethod
    def validate_slot_durations(cls, value: List[int]) -> List[int]:
        """Ensure durations are supported and deduplicated."""
        if not value:
            raise ValueError("slot_durations must not be empty")

        supported = {int(d) for d in SlotDuration}
        invalid = [d for d in value if d not in supported]
        if invalid:
            raise ValueError(
                f"slot_durations must be one of {sorted(supported)}, got {invalid}"
            )

        # Preserve order while removing duplicates
        deduped: List[int] = []
        for duration in value:
            if duration not in deduped:
                deduped.append(duration)
        return deduped

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    @classmethod
    def load(cls, config_path: Path | None = None) -> "AppConfig":
        """
        Load an explicit config file, or the default one if it exists.

        Falls back to built-in defaults when no file was requested and none
        is found.
        """
        if config_path is not None:
            return cls.load_from_yaml(config_path)

        default_path = get_default_config_path()
        if default_path.exists():
            return cls.load_from_yaml(default_path)

        return cls()


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
