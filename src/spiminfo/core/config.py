"""Configuration management for spiminfo."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .exceptions import ConfigError

# Fixed layout of a SPIM directory, relative to its root
DATA_DIR_NAME = "data"
INDEX_NAME = "index.txt"
DATA_NAME = "data.bin"
META_NAME = "metadata.txt"

# Pixel size of the reference microscope (microns)
LATERAL_PIXEL_SIZE = 0.162
DEFAULT_AXIAL_PIXEL_SIZE = 0.5

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LayoutConfig:
    """File and directory names of a SPIM directory."""

    data_dir_name: str = DATA_DIR_NAME
    index_name: str = INDEX_NAME
    data_name: str = DATA_NAME
    metadata_name: str = META_NAME


@dataclass
class PixelSizeConfig:
    """Pixel size constants (microns)."""

    lateral: float = LATERAL_PIXEL_SIZE
    default_axial: float = DEFAULT_AXIAL_PIXEL_SIZE


@dataclass
class IndexConfig:
    """Index file parsing options."""

    strict: bool = False


@dataclass
class SpimConfig:
    """Main spiminfo configuration."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    pixel_size: PixelSizeConfig = field(default_factory=PixelSizeConfig)
    index: IndexConfig = field(default_factory=IndexConfig)
    log_level: str = "INFO"

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "SpimConfig":
        """Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            SpimConfig instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If YAML is empty or invalid
        """
        yaml_file = Path(yaml_path)
        if not yaml_file.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_file) as f:
            config_dict = yaml.safe_load(f)

        if not isinstance(config_dict, dict):
            raise ValueError(f"Empty or invalid YAML file: {yaml_path}")

        return cls.from_dict(config_dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SpimConfig":
        """Create configuration from dictionary.

        Args:
            config_dict: Configuration dictionary

        Returns:
            SpimConfig instance

        Raises:
            ConfigError: If a section holds unknown keys
        """
        try:
            return cls(
                layout=LayoutConfig(**config_dict.get("layout", {})),
                pixel_size=PixelSizeConfig(**config_dict.get("pixel_size", {})),
                index=IndexConfig(**config_dict.get("index", {})),
                log_level=config_dict.get("log_level", "INFO"),
            )
        except TypeError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Configuration as nested dictionary
        """
        return {
            "layout": {
                "data_dir_name": self.layout.data_dir_name,
                "index_name": self.layout.index_name,
                "data_name": self.layout.data_name,
                "metadata_name": self.layout.metadata_name,
            },
            "pixel_size": {
                "lateral": self.pixel_size.lateral,
                "default_axial": self.pixel_size.default_axial,
            },
            "index": {
                "strict": self.index.strict,
            },
            "log_level": self.log_level,
        }

    def save_yaml(self, yaml_path: str):
        """Save configuration to YAML file.

        Args:
            yaml_path: Path to save YAML file
        """
        yaml_file = Path(yaml_path)
        yaml_file.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_file, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self) -> List[str]:
        """Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Layout names must be plain, non-empty names
        for name in ("data_dir_name", "index_name", "data_name", "metadata_name"):
            value = getattr(self.layout, name)
            if not value or "/" in value or "\\" in value:
                errors.append(f"layout.{name} must be a non-empty file name")

        if self.pixel_size.lateral <= 0:
            errors.append("pixel_size.lateral must be > 0")
        if self.pixel_size.default_axial <= 0:
            errors.append("pixel_size.default_axial must be > 0")

        if str(self.log_level).upper() not in LOG_LEVELS:
            errors.append(f"log_level must be one of {', '.join(LOG_LEVELS)}")

        return errors
