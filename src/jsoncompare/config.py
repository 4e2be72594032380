"""
Run configuration for jsoncompare.

A YAML file names the two documents to compare and where to write the
tabular report:

    input:
      file_path: ./data/
      file_name_1: before.json
      file_name_2: after.json
    output:
      csv_path: comparison_result.csv
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yml"
DEFAULT_CSV_PATH = "comparison_result.csv"
OUTPUT_FORMATS = ("text", "json")


@dataclass
class InputConfig:
    """The two documents to compare."""
    file_name_1: str
    file_name_2: str
    file_path: str = ""

    @property
    def first_path(self) -> Path:
        return Path(self.file_path) / self.file_name_1

    @property
    def second_path(self) -> Path:
        return Path(self.file_path) / self.file_name_2


@dataclass
class OutputConfig:
    """Where and how to report."""
    csv_path: Optional[str] = DEFAULT_CSV_PATH
    format: str = "text"
    sort_keys: bool = True


@dataclass
class CompareConfig:
    """Complete run configuration."""
    input: InputConfig
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "<config>") -> "CompareConfig":
        """
        Build a configuration from parsed YAML.

        Args:
            data: Parsed configuration mapping
            source: Name used in error messages

        Raises:
            ConfigError: If required settings are missing or malformed
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping", path=source)

        input_data = data.get("input")
        if not isinstance(input_data, dict):
            raise ConfigError("Missing 'input' section", path=source)

        for key in ("file_name_1", "file_name_2"):
            if not input_data.get(key):
                raise ConfigError(f"Missing 'input.{key}'", path=source)

        output_data = data.get("output") or {}
        if not isinstance(output_data, dict):
            raise ConfigError("'output' section must be a mapping", path=source)

        output_format = output_data.get("format", "text")
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"Unsupported output format {output_format!r}", path=source)

        sort_keys = output_data.get("sort_keys", True)
        if not isinstance(sort_keys, bool):
            raise ConfigError(f"'output.sort_keys' must be true or false, got {sort_keys!r}", path=source)

        return cls(
            input=InputConfig(
                file_name_1=str(input_data["file_name_1"]),
                file_name_2=str(input_data["file_name_2"]),
                file_path=str(input_data.get("file_path") or ""),
            ),
            output=OutputConfig(
                csv_path=output_data.get("csv_path", DEFAULT_CSV_PATH),
                format=output_format,
                sort_keys=sort_keys,
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "input": {
                "file_path": self.input.file_path,
                "file_name_1": self.input.file_name_1,
                "file_name_2": self.input.file_name_2,
            },
            "output": {
                "csv_path": self.output.csv_path,
                "format": self.output.format,
                "sort_keys": self.output.sort_keys,
            },
        }


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> CompareConfig:
    """
    Load the run configuration from a YAML file.

    Args:
        path: Configuration file path

    Returns:
        The parsed CompareConfig

    Raises:
        ConfigError: If the file cannot be read or is malformed
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError("Error opening config file", path=str(path), cause=e) from e
    except yaml.YAMLError as e:
        raise ConfigError("Error decoding YAML config", path=str(path), cause=e) from e

    config = CompareConfig.from_dict(data, source=str(path))
    logger.debug(f"Loaded config from {path}")
    return config
