"""Configuration management for mp3tagreader.

Handles saving and loading user preferences: the placeholder tag written by
``--write``, temporary file placement and the default log level.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

import tomli_w

from .constants import COPY_CHUNK_SIZE, FIELDS
from .tagging.record import TagRecord

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory.

    Returns:
        Path to config directory (~/.mp3tagreader on all platforms)
    """
    config_dir = Path.home() / ".mp3tagreader"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """Get the full path to the config file."""
    return get_config_dir() / "config.toml"


class Config:
    """Configuration manager for application settings."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "placeholder": {
            # Tag written by --write
            "version": "ID3v2.3",
            "title": "dummy title",
            "artist": "dummy artist",
            "album": "dummy album",
            "year": "dummy year",
            "comment": "dummy comment",
            "genre": "dummy genre",
        },
        "writer": {
            # Empty means next to the file being rewritten
            "temp_dir": "",
            "chunk_size": COPY_CHUNK_SIZE,
        },
        "logging": {
            # Used when --log-level is not given
            "level": "critical",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Config file to use. If None, ~/.mp3tagreader/config.toml
        """
        self.config_path = Path(config_path) if config_path is not None else get_config_path()
        self.data: Dict[str, Any] = copy.deepcopy(self.DEFAULT_CONFIG)
        self._dirty = False
        self.load()

    def load(self) -> bool:
        """Load configuration from file.

        Returns:
            True if loaded successfully, False if file doesn't exist or error occurred
        """
        if not self.config_path.exists():
            return False

        try:
            with open(self.config_path, "rb") as f:
                loaded_data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Error loading config %s: %s", self.config_path, e)
            return False

        self._merge_config(self.data, loaded_data)
        self._dirty = False
        return True

    def save(self, force: bool = False) -> bool:
        """Save configuration to file.

        Args:
            force: If True, save even if config hasn't been modified

        Returns:
            True if saved successfully, False otherwise
        """
        if not force and not self._dirty:
            return True

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "wb") as f:
                tomli_w.dump(self.data, f)
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_path, e)
            return False

        self._dirty = False
        return True

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """Recursively merge override dict into base dict."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def is_dirty(self) -> bool:
        return self._dirty

    # Placeholder tag
    def get_placeholder_record(self) -> TagRecord:
        """Build the record written by --write."""
        return TagRecord.from_dict(self.data["placeholder"])

    def set_placeholder_field(self, field: str, value: str) -> None:
        """Change one placeholder value.

        Raises:
            ValueError: If ``field`` is neither a tag field nor ``version``
        """
        if field != "version" and field not in FIELDS:
            raise ValueError(f"Unknown placeholder field: {field}")
        self.data["placeholder"][field] = value
        self._dirty = True

    # Writer settings
    def get_temp_dir(self) -> Optional[str]:
        """Directory for temporary files, or None for next to the target."""
        return self.data["writer"].get("temp_dir") or None

    def set_temp_dir(self, path: str) -> None:
        self.data["writer"]["temp_dir"] = path
        self._dirty = True

    def get_chunk_size(self) -> int:
        return self.data["writer"].get("chunk_size", COPY_CHUNK_SIZE)

    def set_chunk_size(self, size: int) -> None:
        """Set the audio copy buffer size.

        Raises:
            ValueError: If size is not positive
        """
        if size <= 0:
            raise ValueError("Chunk size must be positive")
        self.data["writer"]["chunk_size"] = size
        self._dirty = True

    # Logging settings
    def get_log_level(self) -> str:
        return self.data["logging"].get("level", "critical")

    def set_log_level(self, level: str) -> None:
        self.data["logging"]["level"] = level
        self._dirty = True
