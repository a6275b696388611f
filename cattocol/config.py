"""Configuration management

Loads default combine settings from a YAML file.
"""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .combine import CombinerConfig

MODES = ("col", "cat", "pairs")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CombineSettings:
    """How the two texts are combined"""

    mode: str = "col"
    fill: str = " "
    repeat: int = 1

    def to_combiner_config(self) -> CombinerConfig:
        return CombinerConfig(fill=self.fill, repeat=self.repeat)


@dataclass
class LoggingSettings:
    """Logging configuration"""

    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration class"""

    combine: CombineSettings = field(default_factory=CombineSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Config":
        """Load configuration from YAML file

        Args:
            config_path: Configuration file path

        Returns:
            Config instance

        Raises:
            FileNotFoundError: Configuration file does not exist
            ValueError: Invalid configuration format or values
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build configuration from parsed YAML data, validating every value"""
        if not isinstance(data, dict):
            raise ValueError("Configuration file must contain a mapping")

        combine_data = data.get("combine") or {}
        logging_data = data.get("logging") or {}
        if not isinstance(combine_data, dict) or not isinstance(logging_data, dict):
            raise ValueError("'combine' and 'logging' sections must be mappings")

        combine = CombineSettings(
            mode=str(combine_data.get("mode", "col")),
            fill=combine_data.get("fill", " "),
            repeat=combine_data.get("repeat", 1),
        )
        if combine.mode not in MODES:
            raise ValueError(f"Invalid combine mode: {combine.mode}. Must be one of {', '.join(MODES)}")
        # Raises ValueError for a bad fill or repeat
        combine.to_combiner_config()

        level = str(logging_data.get("level", "WARNING")).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid logging level: {level}")

        return cls(combine=combine, logging=LoggingSettings(level=level))

    @staticmethod
    def get_package_dir() -> Path:
        """Get the package installation directory"""
        return Path(__file__).parent

    @classmethod
    def find_config_file(cls, filename: str) -> Path | None:
        """Find configuration file with priority order

        Search order:
        1) cattocol/config/{filename} in current directory (development mode)
        2) ~/.cattocol/config/{filename} (user config)
        3) <package>/config/{filename} (installed package)

        Args:
            filename: Configuration file name

        Returns:
            Path to the first existing file, or None if not found
        """
        search_paths = [
            Path.cwd() / "cattocol" / "config" / filename,
            Path.home() / ".cattocol" / "config" / filename,
            cls.get_package_dir() / "config" / filename,
        ]

        for path in search_paths:
            if path.is_file():
                return path
        return None

    @classmethod
    def get_default_config_path(cls) -> Path | None:
        """Get the default config.yaml path, or None to use built-in defaults"""
        return cls.find_config_file("config.yaml")

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "Config":
        """Load an explicit config file, else the first one found, else defaults"""
        if config_path is None:
            config_path = cls.get_default_config_path()
            if config_path is None:
                return cls()
        return cls.from_yaml(config_path)
