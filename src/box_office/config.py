"""Configuration model for the box office catalog."""

from pathlib import Path
from typing import Any, Dict, Optional
import json
from dataclasses import dataclass, asdict, fields

from .exceptions import ConfigurationError


@dataclass
class CatalogConfig:
    """Where catalog files live and how they are written."""
    data_dir: Path = Path(".")
    delimited_filename: str = "movies.txt"
    document_filename: str = "movies.json"
    encoding: str = "utf-8"
    strict_lines: bool = False  # raise on delimited lines with the wrong field count
    json_indent: Optional[int] = 2

    @property
    def delimited_path(self) -> Path:
        return Path(self.data_dir) / self.delimited_filename

    @property
    def document_path(self) -> Path:
        return Path(self.data_dir) / self.document_filename

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        kwargs = dict(data)
        if "data_dir" in kwargs:
            kwargs["data_dir"] = Path(kwargs["data_dir"])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["data_dir"] = str(self.data_dir)
        return data


def load_config(config_path: Path) -> CatalogConfig:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in config {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Config {config_path} must contain a JSON object")

    return CatalogConfig.from_dict(config_data)


def save_config(config: CatalogConfig, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)
