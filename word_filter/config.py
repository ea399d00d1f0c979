"""
Configuration loader for word-filter.

Loads settings from YAML config file with sensible defaults.
"""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """Configuration for the word filter."""
    word_list_path: str = ""  # Empty means the bundled English list
    use_regex: bool = False  # Treat list entries as regular expressions
    clean_with: Union[str, List[str]] = "*"  # String, or list of characters drawn at random
    strictness: int = 1  # 0: high, 1: medium, 2: low (reserved)


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "WARNING"
    log_file: str = ""


@dataclass
class Config:
    """Main configuration container."""
    filter: FilterConfig = field(default_factory=FilterConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from YAML file.

        If no path is provided, uses default values.
        Missing keys in the config file will use defaults.
        """
        config = cls()

        if config_path and Path(config_path).exists():
            logger.info(f"Loading configuration from {config_path}")
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f) or {}

            for section in ('filter', 'logging'):
                target = getattr(config, section)
                for key, value in (data.get(section) or {}).items():
                    if hasattr(target, key):
                        setattr(target, key, value)
                    else:
                        # min_filtered / filter are recomputed from the word list
                        logger.debug(f"Ignoring unknown {section} setting: {key}")

        return config

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        data = asdict(self)
        logger.info(f"Saving configuration to {config_path}")

        with open(config_path, 'w') as f:
            yaml.dump(data, f, default_flow_style=False)
